"""Host adapters for driving windows from UI toolkits."""
