from .console import book_room_flow, format_room_details, run_console_session, show_room_details

__all__ = [
    "run_console_session",
    "book_room_flow",
    "show_room_details",
    "format_room_details",
]
