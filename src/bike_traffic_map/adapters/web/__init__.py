"""Web adapters for displaying the traffic map."""

from bike_traffic_map.adapters.web.pyview_app import PyViewWebAdapter

__all__ = ["PyViewWebAdapter"]
