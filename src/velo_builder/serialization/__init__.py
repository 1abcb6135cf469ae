"""Serialization module — export velos to JSON-compatible structures."""

from velo_builder.serialization.json_export import to_dict, to_json_list, to_json_string

__all__ = ["to_dict", "to_json_list", "to_json_string"]
