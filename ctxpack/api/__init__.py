"""API module for ctxpack.

Domain packages (store, manifest, vector, embed, config) hold the operations;
cmd_* functions wrap them in StageResult for the CLI.
"""

__all__ = []
