"""Font download tool plugin."""
