"""Visual workflow and pipeline builder core."""
