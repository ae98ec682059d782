"""
memkit: building blocks for Matrix-Element-Method phase-space integration.
"""
