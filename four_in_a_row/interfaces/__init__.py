"""
four_in_a_row.interfaces - User interfaces for four-in-a-row

Only the command-line interface lives here; the engine itself has no
presentation code.
"""

# Don't import anything here to avoid circular imports
__all__ = []
