"""User-facing strings, shared by the renderer and the controller."""

DEFAULT_LOADING = "Cargando..."
COCKTAIL_NOT_FOUND = "No se encontró ningún cóctel con ese nombre."
COCKTAILS_NOT_FOUND = "No se encontraron cócteles."
CATEGORIES_NOT_FOUND = "No se encontraron categorías."
EMPTY_SEARCH = "Por favor, introduce un nombre de cóctel para buscar."

# {term} is filled in by the page script as well, keep the placeholder name stable
SEARCH_LOADING = 'Buscando "{term}"...'
RANDOM_LOADING = "Buscando un cóctel aleatorio..."
DETAIL_LOADING = "Cargando detalles del cóctel..."
CATEGORIES_LOADING = "Cargando categorías..."


def search_loading(term: str) -> str:
    return SEARCH_LOADING.replace("{term}", term)


def category_loading(category: str) -> str:
    return f'Cargando cócteles de la categoría "{category}"...'


def category_empty(category: str) -> str:
    return f'No se encontraron cócteles en la categoría "{category}".'


def category_error(category: str) -> str:
    return f'Error al cargar cócteles de la categoría "{category}"'
