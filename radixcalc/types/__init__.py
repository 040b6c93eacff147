from radixcalc.types.value import Value, Undefined, UndefinedType, Integer, Float, to_value
from radixcalc.types.stack import Stack

__all__ = ["Value", "Undefined", "UndefinedType", "Integer", "Float", "to_value", "Stack"]
