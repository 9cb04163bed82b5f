import importlib

mod = "json2pojo"
class LazyLoader:
    """
    Lazy loader for the json2pojo functions to speed up startup time.
    """
    def __init__(self, mappings):
        self._modules = {}
        self._mappings = mappings

    def _load_module(self, module_name):
        if module_name not in self._modules:
            self._modules[module_name] = importlib.import_module(module_name)
        return self._modules[module_name]

    def __getattr__(self, item):
        if item in self._mappings:
            module_name, func_name = self._mappings[item]
            module = self._load_module(module_name)
            return getattr(module, func_name)
        else:
            return self._load_module(f"{mod}.{item}")

# Define the functions and their corresponding module paths
_mappings = {
    "infer_class_model": (f"{mod}.jsontopojo", "infer_class_model"),
    "convert_json_to_class_model": (f"{mod}.jsontopojo", "convert_json_to_class_model"),
    "convert_json_to_java": (f"{mod}.jsontopojo", "convert_json_to_java"),
    "convert_class_model_to_java": (f"{mod}.pojotojava", "convert_class_model_to_java"),
    "build_class_registry": (f"{mod}.schemabuilder", "build_class_registry"),
    "classify": (f"{mod}.typeresolver", "classify"),
}

_lazy_loader = LazyLoader(_mappings)

def __getattr__(name):
    return getattr(_lazy_loader, name)
