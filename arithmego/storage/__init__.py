"""JSON storage for user configuration and session statistics."""