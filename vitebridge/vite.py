from typing import Dict, List, Optional

from apps.vite.vite import vite

# Helper for the SPA view: plain URL lists instead of ready-made tags.
# In development the dev server client comes first in "js".

def get_vite_assets(entry: str = "main", config: Optional[str] = None) -> Dict[str, List[str]]:
    urls = vite(config).get_urls(entry)
    return {
        "css": urls["styles"],
        "js": urls["scripts"],
        "preload": urls["preloads"],
    }
