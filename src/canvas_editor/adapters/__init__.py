"""Host adapters for the editor core."""
