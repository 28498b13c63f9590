from src.app_schematic.generate import (
    GenerationResult,
    apply_result,
    generate_app,
    run_app_schematic,
)
from src.app_schematic.options import AppOptions, InvalidOptionsError

__all__ = [
    "AppOptions",
    "GenerationResult",
    "InvalidOptionsError",
    "apply_result",
    "generate_app",
    "run_app_schematic",
]
