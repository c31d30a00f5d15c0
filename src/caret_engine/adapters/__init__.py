"""Host adapters that feed input into an editor session."""
