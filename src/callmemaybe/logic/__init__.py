"""Logic – user commands driving the query engine."""
