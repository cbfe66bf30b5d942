"""CDDB protocol core: status codes, response framing, record parsing and commands.

Submodules are imported directly (``gnudb.protocol.framing`` and friends);
the transports depend on ``gnudb.protocol.ports`` so this package keeps no
eager imports.
"""
