from collections.abc import Sequence


class FormatError(ValueError):
    """Raised when a statement header lacks one of the required columns."""

    def __init__(self, missing_columns: Sequence[str]) -> None:
        self.missing_columns = tuple(missing_columns)
        super().__init__(
            "Statement format not recognized. Missing column(s): "
            f"{', '.join(self.missing_columns)}. Please ensure the header contains "
            "DATA CONT., DESCRIZIONE and IMPORTO columns."
        )
