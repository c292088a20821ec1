"""Value model: shapes, numerals."""
