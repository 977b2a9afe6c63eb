"""Intermediate Representation (IR) of cgo-exported Go functions.

The IR is what the Go extractor builds from tree-sitter parse trees and what
both binding generators read. It normalizes:
- Function names and documentation
- Parameters, in declaration order
- Parameter and return types, reduced to boundary types
"""
