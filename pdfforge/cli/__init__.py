"""Command line interface for :mod:`pdfforge`."""
