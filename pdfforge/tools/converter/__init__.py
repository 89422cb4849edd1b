"""Convert tool plugin."""
