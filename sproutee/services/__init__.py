"""Services used by the sproutee commands."""
