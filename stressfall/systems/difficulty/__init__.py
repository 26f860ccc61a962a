from stressfall.systems.difficulty.difficulty_curve import (
    DifficultyCurve,
    validate_checkpoints,
    value_at,
)

__all__ = [
    'DifficultyCurve',
    'validate_checkpoints',
    'value_at',
]
