"""
Movie review feature generator.

Turns labeled movie reviews into connotation count vectors using the
General Inquirer lexicon:

- lexicon: lexicon normalization into a read-only ConnotationTable
- features: negation scoping, stemming and connotation counting
- pipeline: per-document orchestration over a labeled corpus
- io: corpus reading, CSV and ARFF output
- config: Pydantic settings loaded from configs/config.yaml
"""

__version__ = "0.1.0"
