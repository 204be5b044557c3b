"""lolli — CLI, konfiguracja i logowanie workbencha logiki liniowej."""
