"""payledger — payroll ledger for fixed and hourly employees."""

__version__ = "0.1.0"
