"""Display formatting for weights and percentages."""

KG_PER_TON = 1000


def format_weight(weight_kg: float) -> str:
    """Format a weight in kg, switching to tons from 1000 kg upwards."""
    if weight_kg >= KG_PER_TON:
        return f"{weight_kg / KG_PER_TON:.2f} t"
    return f"{weight_kg:.0f} kg"


def format_percentage(value: float, digits: int = 1) -> str:
    return f"{value:.{digits}f}%"
