from typing import Dict, List

import pandas as pd
import plotly.graph_objects as go

from .formatters import format_date
from .styles import COLORS


def _build_configs_dataframe(configs: List[Dict]) -> pd.DataFrame:
	"""
	Convert configs list into a display DataFrame, most recently updated first.
	"""
	if not configs:
		return pd.DataFrame()

	rows = []
	for config in configs:
		rows.append({
			"Name": config.get("name", ""),
			"Instrument": config.get("instrument", ""),
			"Timeframe": config.get("timeframe", ""),
			"Entry": config.get("entryThreshold"),
			"Exit": config.get("exitThreshold"),
			"Max Loss %": config.get("maxLossPercent"),
			"Trades/Day": config.get("maxTradesPerDay"),
			"Enabled": bool(config.get("enabled")),
			"Stop-Loss": bool(config.get("stopLossEnabled")),
			"Created": format_date(config.get("createdAt", "")),
			"_updated": config.get("updatedAt", ""),
		})

	df = pd.DataFrame(rows)
	for col in ["Entry", "Exit", "Max Loss %", "Trades/Day"]:
		df[col] = pd.to_numeric(df[col], errors="coerce")

	df["_updated"] = pd.to_datetime(df["_updated"], errors="coerce", utc=True)
	df = df.sort_values("_updated", ascending=False, na_position="last")
	df = df.drop(columns="_updated").reset_index(drop=True)
	return df


def _create_instrument_chart(instruments: Dict[str, int]) -> go.Figure:
	"""Bar chart of configurations per instrument."""
	names = sorted(instruments)
	fig = go.Figure(
		go.Bar(
			x=names,
			y=[instruments[n] for n in names],
			marker_color=COLORS["accent_blue"],
		)
	)
	fig.update_layout(
		height=260,
		margin=dict(l=10, r=10, t=30, b=10),
		title="Configs per instrument",
		paper_bgcolor=COLORS["bg_primary"],
		plot_bgcolor=COLORS["bg_primary"],
		font=dict(color=COLORS["text_primary"]),
		yaxis=dict(dtick=1, gridcolor=COLORS["border"]),
	)
	return fig
