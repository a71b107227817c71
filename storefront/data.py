"""Built-in shops and menu shipped with the storefront.

Menu entries carry no shop id: a built-in shop serves every entry whose
category is one of its own categories.
"""

DEFAULT_SHOPS = [
    {
        "id": "wow-momo",
        "name": "Wow Momo",
        "logo": "https://images.unsplash.com/photo-1563379926898-05f4575a45d8?q=80&w=2070&auto=format&fit=crop",
        "description": "Authentic Asian cuisine with a modern twist.",
        "categories": ["Chinese", "Momos", "Asian"],
    },
    {
        "id": "burger-club",
        "name": "Burger Club",
        "logo": "https://images.unsplash.com/photo-1586190848861-99aa4a171e90?q=80&w=1780&auto=format&fit=crop",
        "description": "Premium burgers made with the finest ingredients.",
        "categories": ["Burger", "Fast Food", "American"],
    },
    {
        "id": "pizza-paradise",
        "name": "Pizza Paradise",
        "logo": "https://images.unsplash.com/photo-1513104890138-7c749659a591?q=80&w=2070&auto=format&fit=crop",
        "description": "Authentic Italian pizzas with premium toppings.",
        "categories": ["Pizza", "Italian", "Fast Food"],
    },
    {
        "id": "bella-italia",
        "name": "Bella Italia",
        "logo": "https://images.unsplash.com/photo-1498579150354-977475b7ea0b?q=80&w=2070&auto=format&fit=crop",
        "description": "Traditional Italian cuisine with recipes passed down through generations.",
        "categories": ["Italian", "Pasta", "Risotto"],
    },
]

DEFAULT_MENU = [
    {
        "id": "veg-momos",
        "name": "Veg Steamed Momos",
        "description": "Steamed dumplings stuffed with cabbage, carrot and onion.",
        "price": 4.99,
        "image": "https://images.unsplash.com/photo-1534422298391-e4f8c172dddb?q=80&w=1974&auto=format&fit=crop",
        "category": "Momos",
    },
    {
        "id": "chilli-noodles",
        "name": "Chilli Garlic Noodles",
        "description": "Wok-tossed noodles with garlic, chilli and spring onion.",
        "price": 7.49,
        "image": "https://images.unsplash.com/photo-1585032226651-759b368d7246?q=80&w=1992&auto=format&fit=crop",
        "category": "Chinese",
    },
    {
        "id": "classic-burger",
        "name": "Classic Burger",
        "description": "Juicy chicken patty with fresh lettuce, tomato, and special sauce.",
        "price": 8.99,
        "image": "https://images.unsplash.com/photo-1568901346375-23c9450c58cd?q=80&w=1899&auto=format&fit=crop",
        "category": "Burger",
    },
    {
        "id": "cheese-burger",
        "name": "Cheese Burger",
        "description": "Classic burger topped with melted cheddar cheese.",
        "price": 9.99,
        "image": "https://images.unsplash.com/photo-1565299507177-b0ac66763828?q=80&w=1964&auto=format&fit=crop",
        "category": "Burger",
    },
    {
        "id": "loaded-fries",
        "name": "Loaded Fries",
        "description": "Crispy fries with cheese sauce and jalapenos.",
        "price": 5.49,
        "image": "https://images.unsplash.com/photo-1573080496219-bb080dd4f877?q=80&w=1974&auto=format&fit=crop",
        "category": "Fast Food",
    },
    {
        "id": "margherita",
        "name": "Margherita Pizza",
        "description": "Tomato, mozzarella and fresh basil on a thin crust.",
        "price": 10.99,
        "image": "https://images.unsplash.com/photo-1574071318508-1cdbab80d002?q=80&w=2069&auto=format&fit=crop",
        "category": "Pizza",
    },
    {
        "id": "carbonara",
        "name": "Spaghetti Carbonara",
        "description": "Classic pasta with eggs, cheese, pancetta, and black pepper.",
        "price": 13.99,
        "image": "https://images.unsplash.com/photo-1612874742237-6526221588e3?q=80&w=2071&auto=format&fit=crop",
        "category": "Pasta",
    },
    {
        "id": "mushroom-risotto",
        "name": "Mushroom Risotto",
        "description": "Creamy arborio rice with porcini and parmesan.",
        "price": 12.49,
        "image": "https://images.unsplash.com/photo-1476124369491-e7addf5db371?q=80&w=2070&auto=format&fit=crop",
        "category": "Risotto",
    },
]
