class DuplicateSkuError(Exception):
    """
    Exception raised when a plant variant SKU is already in use
    """
    def __init__(self, sku: str):
        self.sku = sku
        self.message = f"SKU '{sku}' is already in use"
        super().__init__(self.message)
