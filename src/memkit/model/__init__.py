"""
The MODEL layer contains plain physics value types.
It has NO knowledge of the pool, the modules or the integrator.
"""
