from dimensia.units.parser import parse_unit_expr
from dimensia.units.registry import add_default_symbols, add_default_units

__all__ = ["parse_unit_expr", "add_default_units", "add_default_symbols"]
