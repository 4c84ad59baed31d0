from selectorkit.objects.json_codec import field_factory, from_json, to_json
from selectorkit.objects.rectangle import Rectangle

__all__ = ["Rectangle", "field_factory", "from_json", "to_json"]
