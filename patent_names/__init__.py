"""Person/organization classification for raw patent name fields."""
