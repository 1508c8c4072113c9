"""Graph export and layout statistics."""

from castle_builder.graph.export import to_networkx, castle_to_dict, castle_to_json
from castle_builder.graph.stats import LayoutStats, layout_stats

__all__ = ["to_networkx", "castle_to_dict", "castle_to_json", "LayoutStats", "layout_stats"]
