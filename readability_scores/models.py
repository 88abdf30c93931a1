"""
Readability result data model.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ReadabilityScoreResult(BaseModel):
    """
    Counts and scores for one text.

    The base counts are always present. Every other field is present only
    when the metric or word list it belongs to was requested.
    """

    # Basic text statistics
    letter_count: int = Field(..., alias="letterCount", ge=0, description="Total letters in words")
    syllable_count: int = Field(..., alias="syllableCount", ge=0, description="Total syllable count")
    word_count: int = Field(..., alias="wordCount", ge=0, description="Total word count")
    sentence_count: int = Field(..., alias="sentenceCount", ge=0, description="Total sentence count")
    polysyllabic_word_count: int = Field(
        ..., alias="polysyllabicWordCount", ge=0,
        description="Words with 3+ syllables, excluding proper nouns when caps are treated as names"
    )
    polysyllabic_words: Optional[List[str]] = Field(None, alias="polysyllabicWords")

    # Spache
    spache_unique_unfamiliar_word_count: Optional[int] = Field(None, alias="spacheUniqueUnfamiliarWordCount")
    spache_unique_unfamiliar_words: Optional[List[str]] = Field(None, alias="spacheUniqueUnfamiliarWords")
    spache: Optional[float] = Field(None, alias="spache", description="Spache grade level")

    # Dale-Chall
    dale_chall_difficult_word_count: Optional[int] = Field(None, alias="daleChallDifficultWordCount")
    dale_chall_difficult_words: Optional[List[str]] = Field(None, alias="daleChallDifficultWords")
    dale_chall: Optional[int] = Field(None, alias="daleChall", ge=0, le=17, description="Dale-Chall grade level")

    # Grade level formulas
    ari: Optional[float] = Field(None, alias="ari", description="Automated Readability Index")
    coleman_liau: Optional[float] = Field(None, alias="colemanLiau", description="Coleman-Liau index")
    flesch_kincaid: Optional[float] = Field(None, alias="fleschKincaid", description="Flesch-Kincaid grade level")
    smog: Optional[float] = Field(None, alias="smog", description="SMOG grade")
    gunning_fog: Optional[float] = Field(None, alias="gunningFog", description="Gunning Fog index")

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "letterCount": 1020,
                "syllableCount": 340,
                "wordCount": 250,
                "sentenceCount": 15,
                "polysyllabicWordCount": 12,
                "daleChallDifficultWordCount": 31,
                "daleChall": 10,
                "ari": 8.71,
                "colemanLiau": 8.93,
                "fleschKincaid": 8.52,
                "smog": 9.2,
                "gunningFog": 9.07
            }
        }

    def has(self, field_name: str) -> bool:
        """Whether a field is present in this result."""
        return field_name in self.model_fields_set

    def to_dict(self) -> Dict[str, Any]:
        """Present fields only, keyed by their camelCase names."""
        return self.model_dump(by_alias=True, exclude_unset=True)
