"""Pydantic schemas for validating book input."""

from pydantic import BaseModel, Field, field_validator

from .models import Book


class BookCreate(BaseModel):
    """Schema for creating a new book."""

    title: str = Field(..., min_length=1, description="Book title")
    author: str = Field(..., min_length=1, description="Author, matched exactly on search")
    available: bool = Field(default=True, description="Whether the book can be lent")

    @field_validator("title", "author", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        """Strip surrounding whitespace so blank strings fail min_length."""
        if isinstance(v, str):
            return v.strip()
        return v

    def to_model(self) -> Book:
        """Build a transient Book (no id yet) from this schema."""
        return Book(title=self.title, author=self.author, available=self.available)
