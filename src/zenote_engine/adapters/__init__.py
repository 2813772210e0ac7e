"""Host adapters that drive an EditorSession from a concrete UI."""
