"""
静态数据：翻译表、咨询服务、演示用的餐品/用户/评价
"""

from .models.appointment import BookingService

DEFAULT_MEAL_IMAGE = "https://images.unsplash.com/photo-1546069901-ba9599a7e63c"

TRANSLATIONS = {
    "en": {
        "home": "Home",
        "menu": "Menu",
        "all": "All",
        "regular": "Regular",
        "bronze": "Bronze",
        "premium": "Premium",
        "addToCart": "Add to Cart",
        "checkout": "Checkout",
        "shippingDetails": "Shipping Details",
        "securePayment": "Secure Payment",
        "bookConsultation": "Book a Consultation",
        "submitStory": "Share Your Story",
        "dashboard": "Admin Dashboard",
        "signIn": "Sign In",
        "signOut": "Sign Out",
        "chatError": "Sorry, I'm having trouble connecting right now. Please try again.",
    },
    "tw": {
        "home": "Fie",
        "menu": "Aduane",
        "all": "Ne nyinaa",
        "addToCart": "Fa to Kɛntɛn mu",
        "checkout": "Tua ka",
        "bookConsultation": "Hyehyɛ Nhyiamu",
        "signIn": "Kɔ mu",
        "signOut": "Fi mu",
    },
    "fr": {
        "home": "Accueil",
        "menu": "Menu",
        "all": "Tout",
        "addToCart": "Ajouter au panier",
        "checkout": "Paiement",
        "shippingDetails": "Détails de livraison",
        "securePayment": "Paiement sécurisé",
        "bookConsultation": "Réserver une consultation",
        "submitStory": "Partagez votre histoire",
        "dashboard": "Tableau de bord",
        "signIn": "Se connecter",
        "signOut": "Se déconnecter",
    },
    "es": {
        "home": "Inicio",
        "menu": "Menú",
        "all": "Todo",
        "addToCart": "Añadir al carrito",
        "checkout": "Pagar",
        "shippingDetails": "Detalles de envío",
        "securePayment": "Pago seguro",
        "bookConsultation": "Reservar una consulta",
        "submitStory": "Comparte tu historia",
        "dashboard": "Panel de administración",
        "signIn": "Iniciar sesión",
        "signOut": "Cerrar sesión",
    },
    "zh": {
        "home": "首页",
        "menu": "菜单",
        "all": "全部",
        "addToCart": "加入购物车",
        "checkout": "结算",
        "shippingDetails": "配送信息",
        "securePayment": "安全支付",
        "bookConsultation": "预约咨询",
        "submitStory": "分享你的故事",
        "dashboard": "管理后台",
        "signIn": "登录",
        "signOut": "退出登录",
    },
}

SERVICES = [
    BookingService(
        id="s1",
        name="Initial Nutrition Consultation",
        duration_min=60,
        price=50.0,
        description="A full review of your diet, goals and health history with a personalised plan.",
    ),
    BookingService(
        id="s2",
        name="Follow-up Session",
        duration_min=30,
        price=25.0,
        description="Track progress and adjust your plan.",
    ),
    BookingService(
        id="s3",
        name="Weight Management Program",
        duration_min=45,
        price=40.0,
        description="Structured coaching for sustainable weight goals.",
    ),
]

DEMO_USERS = [
    {"role": "user", "name": "Kwame Mensah", "email": "user@example.com", "password": "user123"},
    {"role": "admin", "name": "Admin User", "email": "admin@example.com", "password": "admin123"},
]

DEMO_MEALS = [
    {
        "name": "Grilled Chicken Jollof Bowl",
        "description": "Brown-rice jollof with grilled chicken breast and garden salad.",
        "price": 12.0,
        "calories": 520, "protein": 42, "carbs": 55, "fats": 14,
        "tags": ["Balanced", "Gluten Free"],
        "ingredients": ["brown rice", "chicken breast", "tomato", "pepper", "onion"],
        "category": "Regular",
        "available_add_ons": [
            {"name": "Extra Chicken", "price": 3.0},
            {"name": "Avocado", "price": 1.5},
        ],
    },
    {
        "name": "Kontomire Veggie Stew",
        "description": "Cocoyam-leaf stew with boiled yam and plantain.",
        "price": 9.0,
        "calories": 430, "protein": 14, "carbs": 60, "fats": 12,
        "tags": ["Vegan"],
        "ingredients": ["kontomire", "yam", "plantain", "palm oil"],
        "category": "Regular",
        "available_add_ons": [{"name": "Boiled Egg", "price": 1.0}],
    },
    {
        "name": "Keto Tilapia Plate",
        "description": "Grilled tilapia with sautéed greens and garlic butter.",
        "price": 15.0,
        "calories": 480, "protein": 38, "carbs": 8, "fats": 30,
        "tags": ["Keto", "Pescatarian"],
        "ingredients": ["tilapia", "spinach", "garlic", "butter"],
        "category": "Bronze",
        "available_add_ons": [{"name": "Shito Sauce", "price": 0.5}],
    },
    {
        "name": "Paleo Beef Suya Salad",
        "description": "Spiced suya beef over mixed leaves with roasted vegetables.",
        "price": 18.0,
        "calories": 560, "protein": 45, "carbs": 20, "fats": 32,
        "tags": ["Paleo", "Gluten Free"],
        "ingredients": ["beef", "suya spice", "lettuce", "cucumber", "bell pepper"],
        "category": "Premium",
        "available_add_ons": [
            {"name": "Extra Suya", "price": 4.0},
            {"name": "Sweet Potato Fries", "price": 2.5},
        ],
    },
]

DEMO_STORIES = [
    {"author_name": "Ama Owusu", "content": "Lost 8kg in three months with the weekly plan!", "rating": 5, "date": "2024-05-02"},
    {"author_name": "Kofi Boateng", "content": "Tasty meals and always on time.", "rating": 4, "date": "2024-05-10"},
    {"author_name": "Efua Asante", "content": "The consultation changed how I think about food.", "rating": 5, "date": "2024-06-01"},
]
