"""
Bundled sample dataset.

Used when remote reads fail so the storefront stays browsable, and as the
source of the sales figures shown in the developer analytics.
"""

from .records import Category

DEMO_DEVELOPER_ID = "ai-genix"

CATEGORIES = (
    Category(id="1", name="Web Application", description="Templates and complete solutions for the web."),
    Category(id="2", name="Mobile App", description="Fully functional apps for iOS and Android."),
    Category(id="3", name="Desktop Software", description="Powerful software for Mac, Windows, and Linux."),
    Category(id="4", name="Agentic AI", description="Intelligent agents to automate any task."),
)

SAMPLE_SERVICES = [
    {
        "id": "svc-1",
        "title": "Landing Page Kit",
        "category": "Web Application",
        "developer": "DevCraft",
        "developer_id": "dev-craft",
        "developer_verified": True,
        "rating": 4.7,
        "price": "49.99",
        "image_url": "https://picsum.photos/seed/landing-kit/600/400",
        "description": "Responsive landing page templates with a drag and drop section builder.",
        "image_urls": [],
    },
    {
        "id": "svc-2",
        "title": "SaaS Admin Dashboard",
        "category": "Web Application",
        "developer": "DevCraft",
        "developer_id": "dev-craft",
        "developer_verified": True,
        "rating": 4.5,
        "price": "129.00",
        "image_url": "https://picsum.photos/seed/saas-admin/600/400",
        "description": "Admin panel with billing, team management and analytics widgets.",
        "image_urls": [],
    },
    {
        "id": "svc-3",
        "title": "Invoice Desktop Suite",
        "category": "Desktop Software",
        "developer": "DevCraft",
        "developer_id": "dev-craft",
        "developer_verified": True,
        "rating": 4.1,
        "price": "79.00",
        "image_url": "https://picsum.photos/seed/invoice-suite/600/400",
        "description": "Offline-first invoicing for freelancers on Windows, macOS and Linux.",
        "image_urls": [],
    },
    {
        "id": "svc-4",
        "title": "Customer Support Agent",
        "category": "Agentic AI",
        "developer": "AI Genix",
        "developer_id": "ai-genix",
        "developer_verified": True,
        "rating": 4.9,
        "price": "299.00",
        "image_url": "https://picsum.photos/seed/support-agent/600/400",
        "description": "An autonomous agent that triages tickets and drafts replies from your knowledge base.",
        "image_urls": [],
    },
    {
        "id": "svc-5",
        "title": "Lead Research Agent",
        "category": "Agentic AI",
        "developer": "AI Genix",
        "developer_id": "ai-genix",
        "developer_verified": True,
        "rating": 4.6,
        "price": "199.00",
        "image_url": "https://picsum.photos/seed/lead-agent/600/400",
        "description": "Finds and qualifies prospects, then writes personalised outreach.",
        "image_urls": [],
    },
    {
        "id": "svc-6",
        "title": "AI Content Studio",
        "category": "Web Application",
        "developer": "AI Genix",
        "developer_id": "ai-genix",
        "developer_verified": True,
        "rating": 4.4,
        "price": "89.00",
        "image_url": "https://picsum.photos/seed/content-studio/600/400",
        "description": "Generate blog posts, product copy and social captions in your brand voice.",
        "image_urls": [],
    },
    {
        "id": "svc-7",
        "title": "Photo Retouch Pro",
        "category": "Desktop Software",
        "developer": "PixelPerfect",
        "developer_id": "pixel-perfect",
        "developer_verified": False,
        "rating": 4.2,
        "price": "59.00",
        "image_url": "https://picsum.photos/seed/retouch-pro/600/400",
        "description": "Batch retouching and colour grading for photographers.",
        "image_urls": [],
    },
    {
        "id": "svc-8",
        "title": "Icon Designer",
        "category": "Desktop Software",
        "developer": "PixelPerfect",
        "developer_id": "pixel-perfect",
        "developer_verified": False,
        "rating": 3.9,
        "price": "25.00",
        "image_url": "https://picsum.photos/seed/icon-designer/600/400",
        "description": "Vector icon editor with export presets for every platform.",
        "image_urls": [],
    },
    {
        "id": "svc-9",
        "title": "Workout Tracker",
        "category": "Mobile App",
        "developer": "FitLife Apps",
        "developer_id": "fitlife-apps",
        "developer_verified": True,
        "rating": 4.8,
        "price": "39.99",
        "image_url": "https://picsum.photos/seed/workout-tracker/600/400",
        "description": "Plan routines, log sets and follow progress charts on iOS and Android.",
        "image_urls": [],
    },
    {
        "id": "svc-10",
        "title": "Meal Planner",
        "category": "Mobile App",
        "developer": "FitLife Apps",
        "developer_id": "fitlife-apps",
        "developer_verified": True,
        "rating": 4.3,
        "price": "19.99",
        "image_url": "https://picsum.photos/seed/meal-planner/600/400",
        "description": "Weekly meal plans with shopping lists and macro tracking.",
        "image_urls": [],
    },
]

SAMPLE_REVIEWS = [
    {
        "id": "rev-1",
        "developer_id": "ai-genix",
        "reviewer_name": "Priya Sharma",
        "rating": 5,
        "comment": "The support agent cut our response time in half.",
        "date": "2024-05-02T10:15:00Z",
    },
    {
        "id": "rev-2",
        "developer_id": "ai-genix",
        "reviewer_name": "Marco Rossi",
        "rating": 4,
        "comment": "Great results after a short setup.",
        "date": "2024-04-18T08:00:00Z",
    },
    {
        "id": "rev-3",
        "developer_id": "dev-craft",
        "reviewer_name": "Aisha Khan",
        "rating": 5,
        "comment": "Clean code and quick answers to every question.",
        "date": "2024-03-30T16:45:00Z",
    },
    {
        "id": "rev-4",
        "developer_id": "fitlife-apps",
        "reviewer_name": "Tom Becker",
        "rating": 4,
        "comment": "Solid app, a few more workout templates would be nice.",
        "date": "2024-02-11T12:00:00Z",
    },
]

SALES_DATA = [
    {"developer_id": "ai-genix", "date": "Jan", "revenue": 2400},
    {"developer_id": "ai-genix", "date": "Feb", "revenue": 1398},
    {"developer_id": "ai-genix", "date": "Mar", "revenue": 9800},
    {"developer_id": "ai-genix", "date": "Apr", "revenue": 3908},
    {"developer_id": "ai-genix", "date": "May", "revenue": 4800},
    {"developer_id": "ai-genix", "date": "Jun", "revenue": 3800},
    {"developer_id": "ai-genix", "date": "Jul", "revenue": 4300},
    {"developer_id": "dev-craft", "date": "Jan", "revenue": 1200},
    {"developer_id": "dev-craft", "date": "Feb", "revenue": 3400},
    {"developer_id": "dev-craft", "date": "Mar", "revenue": 2100},
    {"developer_id": "dev-craft", "date": "Apr", "revenue": 5300},
    {"developer_id": "dev-craft", "date": "May", "revenue": 2900},
    {"developer_id": "dev-craft", "date": "Jun", "revenue": 4100},
    {"developer_id": "dev-craft", "date": "Jul", "revenue": 3800},
]

CATEGORY_SALES_DATA = [
    {"developer_id": "ai-genix", "category": "Agentic AI", "revenue": 10480},
    {"developer_id": "ai-genix", "category": "Web Application", "revenue": 4500},
    {"developer_id": "ai-genix", "category": "Mobile App", "revenue": 2500},
    {"developer_id": "dev-craft", "category": "Web Application", "revenue": 8900},
    {"developer_id": "dev-craft", "category": "Desktop Software", "revenue": 3200},
    {"developer_id": "pixel-perfect", "category": "Desktop Software", "revenue": 7500},
    {"developer_id": "fitlife-apps", "category": "Mobile App", "revenue": 12500},
]
