from .entropy import RankedSuggestion, rank, expected_information, uncertainty_bits, DEFAULT_CHUNK_SIZE

__all__ = ["RankedSuggestion", "rank", "expected_information", "uncertainty_bits", "DEFAULT_CHUNK_SIZE"]
