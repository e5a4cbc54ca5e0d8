"""Run command pipelines from an input file to an output file, with small string, memory and list helpers."""

__version__ = "0.1.0"