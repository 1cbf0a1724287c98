"""Service layer: analysis, extraction runs, sessions and question answering."""
