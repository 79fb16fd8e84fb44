"""Command line application for pixie avatars."""
