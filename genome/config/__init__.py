"""Configuration package for genome generation and breeding.

``defaults`` holds tuning constants; ``species`` holds the validated
species description that ties a genome, a mutator, and a breeding
algorithm together.
"""
