from .totals import add_row_totals, add_col_totals, add_totals  # noqa: F401
