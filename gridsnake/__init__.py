"""Fixed-step grid snake: model, engine and pygame front end."""
