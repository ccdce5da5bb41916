"""Demo driver for the factory method lessons."""
