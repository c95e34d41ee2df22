# Data models for the quotes dataset, the per-request view state and the
# rendered view description.

from pydantic import BaseModel, ConfigDict, Field, RootModel
from typing import Dict, List, Optional

from quotebook.core.config import settings

# --- Internal Data Models (static sources) ---

class Quote(BaseModel):
    """A single quotation from the dataset."""
    text: str = Field(..., description="The quotation itself.")
    author: str = Field(..., description="Who said or wrote it.")

class QuotesDataset(RootModel[Dict[str, List[Quote]]]):
    """Root model for quotes.json: language code -> ordered quotes."""

# --- View State ---

class ViewState(BaseModel):
    """What one request is looking at: the language and the search keyword."""
    model_config = ConfigDict(frozen=True)

    lang: str = Field(default_factory=lambda: settings.DEFAULT_LANG, description="Selected language code.")
    keyword: str = Field("", description="Search keyword as typed, not persisted.")

# --- Public Data Transfer Objects (DTOs) ---

class QuoteEntry(BaseModel):
    """One row of the rendered quote list."""
    text: str = Field(..., description="Quote text, or the translated empty-state text.")
    author: Optional[str] = Field(None, description="Secondary author label; absent on the placeholder row.")
    placeholder: bool = Field(False, description="True for the single 'no quotes found' row.")

class QuoteListView(BaseModel):
    """Description of the quote list for a given view state."""
    lang: str = Field(..., description="Language the list was rendered in.")
    keyword: str = Field("", description="Keyword the list was filtered with.")
    total: int = Field(..., description="Number of matching quotes (0 when only the placeholder is shown).")
    entries: List[QuoteEntry] = Field(..., description="Rows to display, never empty.")

class LanguagesResponse(BaseModel):
    """Public DTO for the /api/languages response."""
    languages: List[str] = Field(..., description="Language codes that can be selected.")
    default: str = Field(..., description="Language used when none is selected.")

# --- Error Response Model ---

class ErrorResponse(BaseModel):
    """Standardized error response model."""
    error: str = Field(..., description="A machine-readable error code.")
    detail: str = Field(..., description="A human-readable explanation.")
