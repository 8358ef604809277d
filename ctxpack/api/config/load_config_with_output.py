"""Shared helper to load ctxpack configuration with standard error output."""

from typing import Any

from pydantic import BaseModel

from .CtxpackConfig import CtxpackConfig


def load_config_with_output(
    output_cls: type[BaseModel], **fields: Any
) -> tuple[CtxpackConfig | None, dict | None]:
    """Load CtxpackConfig; on load error return schema-conformant output.

    Args:
        output_cls: Output model to build on failure
        **fields: Extra fields for the failure output

    Returns:
        (config, None) on success; (None, output_dict) on failure
    """
    try:
        return CtxpackConfig.load(), None
    except ValueError as e:
        output = output_cls(errors=[str(e)], warnings=[], **fields).model_dump(mode="python")
        return None, output
