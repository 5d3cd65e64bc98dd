"""Reference table and chart for a conversion, using pandas and Plotly."""

import pandas as pd
import plotly.express as px

from unit_converter.config import REFERENCE_VALUES
from unit_converter.converters import get_strategy
from unit_converter.models import ConversionKind


def conversion_table(kind: ConversionKind, values: list = None) -> pd.DataFrame:
    """Build a two-column table of sample inputs and their converted values.

    Args:
        kind: Which conversion to tabulate
        values: Input values (default: REFERENCE_VALUES for the kind)

    Returns:
        DataFrame with columns named after the source and target units
    """
    strategy = get_strategy(kind)
    if values is None:
        values = REFERENCE_VALUES[kind.label]

    inputs = [float(v) for v in values]
    return pd.DataFrame({
        strategy.source_unit: inputs,
        strategy.target_unit: [strategy.convert(v) for v in inputs],
    })


def create_conversion_chart(kind: ConversionKind, values: list = None):
    """Create a line chart of the reference table.

    Args:
        kind: Which conversion to plot
        values: Input values (default: REFERENCE_VALUES for the kind)

    Returns:
        Plotly figure
    """
    strategy = get_strategy(kind)
    df = conversion_table(kind, values)

    fig = px.line(
        df,
        x=strategy.source_unit,
        y=strategy.target_unit,
        title=f"{kind.label}: {strategy.description}",
        markers=True,
        color_discrete_sequence=['#4ECDC4'],
    )

    fig.update_layout(hovermode='x unified')

    return fig


def format_table(df: pd.DataFrame) -> str:
    """Format a reference table as plain text for the CLI."""
    return df.to_string(index=False)
