class PackerError(Exception):
    """Base for all treepack exceptions."""

    pass


class InvalidDimension(PackerError, ValueError):
    """Width or height is not a positive finite number."""

    def __init__(self, width, height) -> None:
        self.width = width
        self.height = height
        super().__init__(
            "Invalid dimension {}x{}: width and height must be positive numbers".format(
                width, height
            )
        )


class UnplaceableItem(PackerError):
    """Block did not fit into the bin and the bin could not grow around it."""

    def __init__(self, width, height, reason: str = "no free region fits") -> None:
        self.width = width
        self.height = height
        self.reason = reason
        super().__init__("Block {}x{} was not placed: {}".format(width, height, reason))


class ConfigurationError(PackerError, ValueError):
    """Pack settings are inconsistent or name an unknown option."""

    pass
