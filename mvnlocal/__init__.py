"""Local Maven repository artifact finder."""
