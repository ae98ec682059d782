"""
The CORE layer holds the shared value pool, parameter sets and the module
interface that every phase-space or transfer-function block implements.
"""
