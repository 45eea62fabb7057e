from .time_format import day_string, format_time_string, parse_time_string, time_sort_key

__all__ = ["day_string", "format_time_string", "parse_time_string", "time_sort_key"]
