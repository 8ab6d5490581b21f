"""Demo catalog loaded by ``flask seed``."""

from datetime import date

PRODUCTS = [
    {
        "name": "Classic White T-Shirt",
        "price": 29.99,
        "original_price": 39.99,
        "description": "Premium cotton t-shirt with a comfortable fit",
        "category": "Tops",
        "brand": "FashionCo",
        "images": ["/assets/images/tshirt1.avif", "/assets/images/tshirt2.webp"],
        "sizes": ["S", "M", "L", "XL"],
        "colors": ["White", "Black", "Navy"],
        "rating": 4.5,
        "review_count": 128,
        "is_on_sale": True,
        "discount": 25,
        "gender": "Unisex",
    },
    {
        "name": "Denim Jeans",
        "price": 79.99,
        "description": "Classic blue denim jeans with modern fit",
        "category": "Bottoms",
        "brand": "DenimBrand",
        "images": ["/assets/images/jeans1.jpg", "/assets/images/jeans2.webp"],
        "sizes": ["28", "30", "32", "34", "36"],
        "colors": ["Blue", "Black"],
        "rating": 4.2,
        "review_count": 89,
        "is_new": True,
        "gender": "Men",
    },
    {
        "name": "Summer Dress",
        "price": 59.99,
        "description": "Light and breezy summer dress perfect for warm weather",
        "category": "Dresses",
        "brand": "SummerStyle",
        "images": ["/assets/images/dress1.webp", "/assets/images/dress2.webp"],
        "sizes": ["XS", "S", "M", "L"],
        "colors": ["Floral", "Solid Blue", "White"],
        "rating": 4.7,
        "review_count": 156,
        "is_on_sale": True,
        "discount": 15,
        "gender": "Women",
    },
    {
        "name": "Hoodie",
        "price": 49.99,
        "description": "Comfortable hoodie for casual wear",
        "category": "Outerwear",
        "brand": "ComfortWear",
        "images": ["/assets/images/hoodie1.webp", "/assets/images/hoodie2.webp"],
        "sizes": ["S", "M", "L", "XL", "XXL"],
        "colors": ["Gray", "Black", "Navy"],
        "rating": 4.3,
        "review_count": 67,
        "gender": "Unisex",
    },
    {
        "name": "Running Shoes",
        "price": 129.99,
        "description": "High-performance running shoes with excellent cushioning",
        "category": "Shoes",
        "brand": "SportMax",
        "images": ["/assets/images/shoes1.jpg", "/assets/images/shoes2.webp"],
        "sizes": ["7", "8", "9", "10", "11", "12"],
        "colors": ["White", "Black", "Blue"],
        "rating": 4.6,
        "review_count": 203,
        "is_new": True,
        "gender": "Unisex",
    },
    {
        "name": "Winter Jacket",
        "price": 199.99,
        "original_price": 249.99,
        "description": "Warm winter jacket with waterproof material",
        "category": "Outerwear",
        "brand": "WinterGear",
        "images": ["/assets/images/jacket1.jpg", "/assets/images/jacket2.jpg"],
        "sizes": ["S", "M", "L", "XL"],
        "colors": ["Black", "Navy", "Brown"],
        "rating": 4.8,
        "review_count": 91,
        "is_on_sale": True,
        "discount": 20,
        "gender": "Unisex",
    },
]

# Keyed by product name
REVIEWS = {
    "Classic White T-Shirt": [
        {
            "user_name": "Sarah Johnson",
            "rating": 5,
            "comment": "Love this t-shirt! Great quality and perfect fit.",
            "review_date": date(2024, 1, 15),
            "verified": True,
        },
        {
            "user_name": "Mike Chen",
            "rating": 4,
            "comment": "Good quality but runs a bit small. Size up!",
            "review_date": date(2024, 1, 10),
            "verified": True,
        },
    ],
}
