"""Core decoding and value-type modules.

WHY: The core package holds the stable heart of the decoder: the index
value types, the error taxonomy, the byte-level read primitives and the
assembly pass that ties the layout strategies together.

HOW: ir.py defines the data structures, reader.py the fixed-width reads,
offsets.py the span pairing, assembler.py the decode entry points.

RULES:
- IR types are the contract with consumers; change with care
- Nothing here opens files or touches the companion text file
"""
