from typing import List, Optional, Sequence

from storefront.schemas.models import FoodItem


def select(items: Sequence[FoodItem], active_category: Optional[str]) -> List[FoodItem]:
    """
    Items visible under ``active_category``:
    - exact match, ignoring case
    - else substring match in either direction, ignoring case
    - else every item, so a shop with a menu never renders an empty list
    Input order is preserved. No active category means no filter.
    """
    items = list(items)
    if not active_category:
        return items
    wanted = active_category.lower()

    exact = [it for it in items if it.category.lower() == wanted]
    if exact:
        return exact

    # an uncategorized item is contained in any active category
    fuzzy = [
        it for it in items
        if wanted in it.category.lower() or it.category.lower() in wanted
    ]
    if fuzzy:
        return fuzzy

    return items
