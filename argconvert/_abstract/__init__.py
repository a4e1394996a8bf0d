"""

"""
from .parser import ArgScanner_i
from .protocols import ParamStruct_p, Registry_p
