# Master data source for the vault catalog. Order here is the display order.
all_assets_data = [
    {
        'id': 'vid_001',
        'type': 'video',
        'title': 'Cinematic Anime Loop — Forest Glow',
        'tags': ['anime', 'loop', 'cinematic'],
        'preview_url': 'https://cdn.coverr.co/videos/coverr-mystic-forest-5584/1080p.mp4?download=true',
        'poster': 'https://images.unsplash.com/photo-1501785888041-af3ef285b470?q=80&w=1200&auto=format&fit=crop',
        'price': 49,
        'credits': 49,
        'duration': 12,
        'attributes': {'resolution': '1080p', 'license': 'COMMERCIAL'},
    },
    {
        'id': 'img_101',
        'type': 'image',
        'title': 'Futuristic Cityscape — Neon Night',
        'tags': ['image', 'city', 'neon'],
        'preview_url': 'https://images.unsplash.com/photo-1496307042754-b4aa456c4a2d?q=80&w=1200&auto=format&fit=crop',
        'poster': 'https://images.unsplash.com/photo-1496307042754-b4aa456c4a2d?q=80&w=600&auto=format&fit=crop',
        'price': 19,
        'credits': 19,
        'attributes': {'resolution': '4K', 'license': 'COMMERCIAL'},
    },
    {
        'id': 'aud_301',
        'type': 'audio',
        'title': 'Ambient AI Pad — Dreamscape',
        'tags': ['audio', 'ambient', 'loop'],
        'preview_url': 'https://cdn.pixabay.com/download/audio/2021/08/04/audio_7b86c2c458.mp3?filename=ambient-8611.mp3',
        'poster': 'https://images.unsplash.com/photo-1510915228340-29c85a43dcfe?q=80&w=1200&auto=format&fit=crop',
        'price': 29,
        'credits': 29,
        'attributes': {'duration': '00:30', 'license': 'COMMERCIAL'},
    },
    {
        'id': 'img_102',
        'type': 'image',
        'title': 'Product Backdrop — Soft Gradient',
        'tags': ['image', 'background', 'gradient'],
        'preview_url': 'https://images.unsplash.com/photo-1527443154391-507e9dc6c5cc?q=80&w=1200&auto=format&fit=crop',
        'poster': 'https://images.unsplash.com/photo-1527443154391-507e9dc6c5cc?q=80&w=600&auto=format&fit=crop',
        'price': 9,
        'credits': 9,
        'attributes': {'resolution': '2K', 'license': 'CC0'},
    },
    {
        'id': 'vid_002',
        'type': 'video',
        'title': 'Minimal Product Loop — Floating Phone',
        'tags': ['video', 'loop', 'product'],
        'preview_url': 'https://cdn.coverr.co/videos/coverr-holding-a-smartphone-2031/1080p.mp4',
        'poster': 'https://images.unsplash.com/photo-1511707171634-5f897ff02aa9?q=80&w=1200&auto=format&fit=crop',
        'price': 59,
        'credits': 59,
        'attributes': {'resolution': '1080p', 'license': 'COMMERCIAL'},
    },
]
