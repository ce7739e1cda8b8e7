"""candicolor: distinct hues for co-occurring candidates."""
