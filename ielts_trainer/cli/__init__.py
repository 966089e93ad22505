"""Command-line interface for IELTS Trainer."""
