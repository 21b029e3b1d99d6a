"""Pure domain rules: field validation and identifier generation."""
