"""DeepL translation engine behind a generic async engine interface."""
