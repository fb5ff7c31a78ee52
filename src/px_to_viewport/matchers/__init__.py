from px_to_viewport.matchers.pixel_unit import get_unit_regexp
from px_to_viewport.matchers.prop_list import PropList, create_prop_list_matcher

__all__ = ["PropList", "create_prop_list_matcher", "get_unit_regexp"]
