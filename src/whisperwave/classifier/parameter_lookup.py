"""
Parameter Lookup Table

Maps noise class to LMS parameters: step size (μ) and filter length (L).

Per noise type:
    - Lawnmower: Periodic engine noise, short filter with fast adaptation
    - Traffic: Broadband noise, slow adaptation over a longer filter
    - Construction: Mixed impulsive noise, medium filter
    - Fan/HVAC: Steady-state hum, long filter with the slowest adaptation

Crowd, Wind and any unrecognised label fall back to DEFAULT_PARAMS.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .. import config


@dataclass(frozen=True)
class LMSParams:
    """Container for LMS parameters."""
    step_size: float      # Learning rate μ
    filter_length: int    # Number of FIR taps L

    def to_dict(self) -> Dict[str, Any]:
        return {
            'step_size': self.step_size,
            'filter_length': self.filter_length,
        }


OPTIMAL_PARAMS: Dict[str, LMSParams] = {
    'lawnmower': LMSParams(step_size=0.01, filter_length=32),
    'traffic': LMSParams(step_size=0.005, filter_length=128),
    'construction': LMSParams(step_size=0.008, filter_length=64),
    'fan/hvac': LMSParams(step_size=0.003, filter_length=256),
}

# Default parameters (unknown or unmapped noise type)
DEFAULT_PARAMS = LMSParams(
    step_size=config.LMS_STEP_SIZE,
    filter_length=config.LMS_FILTER_LENGTH,
)


def get_params(noise_class: Optional[str]) -> LMSParams:
    """
    Get LMS parameters for a noise class.

    Matching is case-insensitive and ignores surrounding whitespace.

    Args:
        noise_class: Noise label such as 'Lawnmower' or 'Fan/HVAC'

    Returns:
        LMSParams for the class, or DEFAULT_PARAMS if unknown
    """
    if not noise_class:
        return DEFAULT_PARAMS
    return OPTIMAL_PARAMS.get(str(noise_class).strip().lower(), DEFAULT_PARAMS)


def is_known(noise_class: Optional[str]) -> bool:
    """Whether the label has its own row in the table."""
    return bool(noise_class) and str(noise_class).strip().lower() in OPTIMAL_PARAMS


def get_params_dict(noise_class: Optional[str]) -> Dict[str, Any]:
    """
    Get parameters as dictionary.

    Returns:
        Dictionary with 'step_size' and 'filter_length'
    """
    return get_params(noise_class).to_dict()


def get_step_size(noise_class: Optional[str]) -> float:
    """Get step size for noise class."""
    return get_params(noise_class).step_size


def get_filter_length(noise_class: Optional[str]) -> int:
    """Get filter length for noise class."""
    return get_params(noise_class).filter_length


def get_all_params() -> Dict[str, Dict[str, Any]]:
    """
    Get all parameters as nested dictionary, including the default row.

    Returns:
        Dictionary mapping noise class to parameters
    """
    table = {
        noise_class: params.to_dict()
        for noise_class, params in OPTIMAL_PARAMS.items()
    }
    table['default'] = DEFAULT_PARAMS.to_dict()
    return table


def print_params_table():
    """Print a formatted table of all parameters."""
    print("\n" + "=" * 50)
    print("LMS PARAMETERS BY NOISE CLASS")
    print("=" * 50)
    print(f"{'Class':<14} {'Step Size (μ)':<15} {'Filter Length (L)':<18}")
    print("-" * 50)

    for noise_class, params in OPTIMAL_PARAMS.items():
        print(f"{noise_class:<14} {params.step_size:<15.4f} {params.filter_length:<18}")

    print("-" * 50)
    print(f"{'DEFAULT':<14} {DEFAULT_PARAMS.step_size:<15.4f} {DEFAULT_PARAMS.filter_length:<18}")
    print("=" * 50)
