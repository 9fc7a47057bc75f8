"""Host adapters embedding the toolbar in UI frameworks."""
