"""Infrastructure implementations of application ports."""
