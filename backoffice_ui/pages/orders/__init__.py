"""Orders, view order and invoices page objects."""
