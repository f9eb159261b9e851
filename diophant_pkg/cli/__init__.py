# Re-export print_result_pretty for tests
from ..utils.formatting import print_result_pretty
from .app import main_entry

__all__ = ["main_entry", "print_result_pretty"]
