"""
Command-line pipeline around the chunking core.

This package is responsible for:
- Loading chunking defaults from the environment
- Providing a CLI that turns extracted text files into JSONL chunk records
"""
