"""
Built-in modules. Importing this package registers every module type.
"""
from memkit.modules.flat_transfer_function_on_theta import FlatTransferFunctionOnTheta

__all__ = ["FlatTransferFunctionOnTheta"]
