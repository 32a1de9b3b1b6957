"""Wall-chain geometry and product placement kernel for cabinetry rooms."""

__version__ = "0.1.0"
