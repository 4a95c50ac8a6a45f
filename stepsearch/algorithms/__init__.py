"""One module per search variant, each exposing new_session / reset / step / snapshot."""
