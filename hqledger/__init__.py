"""HQ Ledger: invoice, proposal and report document pipeline."""

__version__ = "1.0.0"
