"""Data processing skeleton with CSV and JSON steps."""
import csv
import io
import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pattern_catalogue.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

PROCESSED_AT = "2024-01-01T10:00:00Z"


class DataProcessor(ABC):
    """
    Fixed load -> validate -> transform -> (extra) -> save -> cleanup sequence.

    Subclasses supply the four steps; the remaining hooks have defaults.
    """

    def process(self) -> bool:
        """Run the whole pipeline; returns whether the data was saved."""
        print("Starting data processing...")
        self.load()

        saved = False
        if self.validate():
            self.transform()
            if self.has_additional_processing():
                self.additional_processing()
            self.save()
            saved = True
        else:
            print("Data validation failed!")
            self.handle_validation_error()

        self.cleanup()
        print("Data processing completed.\n")
        logger.debug("Pipeline finished", processor=self.processor_type(), saved=saved)
        return saved

    @abstractmethod
    def processor_type(self) -> str:
        pass

    @abstractmethod
    def load(self) -> None:
        pass

    @abstractmethod
    def validate(self) -> bool:
        pass

    @abstractmethod
    def transform(self) -> None:
        pass

    @abstractmethod
    def save(self) -> None:
        pass

    def has_additional_processing(self) -> bool:
        return False

    def additional_processing(self) -> None:
        print("No additional processing needed")

    def handle_validation_error(self) -> None:
        print("Default validation error handling")

    def cleanup(self) -> None:
        print("Performing default cleanup")


class CSVDataProcessor(DataProcessor):
    """Upper-cases every row; rows must all have the header's column count."""

    DEFAULT_ROWS = "header1,header2,header3\nvalue1,value2,value3\nvalue4,value5,value6\n"

    def __init__(self, filename: str, source: Optional[str] = None):
        self.filename = filename
        self.source = self.DEFAULT_ROWS if source is None else source
        self.rows: List[List[str]] = []

    def processor_type(self) -> str:
        return "CSV Data Processor"

    def load(self) -> None:
        print(f"Loading CSV data from: {self.filename}")
        self.rows = [row for row in csv.reader(io.StringIO(self.source)) if row]
        print(f"Loaded {len(self.rows)} rows")

    def validate(self) -> bool:
        print("Validating CSV data...")
        if not self.rows:
            print("No data to validate")
            return False
        width = len(self.rows[0])
        for index, row in enumerate(self.rows[1:], start=1):
            if len(row) != width:
                print(f"Row {index} has inconsistent number of columns")
                return False
        print("CSV data validation successful")
        return True

    def transform(self) -> None:
        print("Transforming CSV data...")
        self.rows = [[cell.upper() for cell in row] for row in self.rows]
        print("CSV transformation completed")

    def has_additional_processing(self) -> bool:
        return True

    def additional_processing(self) -> None:
        print("Performing CSV-specific formatting...")
        for row in self.rows:
            print(f'  Formatted: "{",".join(row)}"')

    def save(self) -> None:
        print(f"Saving processed CSV data to: {self.filename}_processed.csv")
        for row in self.rows:
            print(f"  {','.join(row)}")
        print("CSV data saved successfully")


class JSONDataProcessor(DataProcessor):
    """Stamps a processing time onto a JSON object fetched from an endpoint."""

    DEFAULT_PAYLOAD = '{"users": [{"name": "John", "age": 30}, {"name": "Jane", "age": 25}]}'

    def __init__(self, endpoint: str, payload: Optional[str] = None):
        self.endpoint = endpoint
        self.payload = self.DEFAULT_PAYLOAD if payload is None else payload
        self.document: Optional[Dict[str, Any]] = None

    def processor_type(self) -> str:
        return "JSON Data Processor"

    def load(self) -> None:
        print(f"Loading JSON data from API: {self.endpoint}")
        print("JSON data loaded")

    def validate(self) -> bool:
        print("Validating JSON data...")
        try:
            document = json.loads(self.payload)
        except json.JSONDecodeError as e:
            logger.info("Rejected JSON payload", endpoint=self.endpoint, error=str(e))
            print("Invalid JSON format")
            return False
        if not isinstance(document, dict):
            print("Invalid JSON format")
            return False
        self.document = document
        print("JSON validation successful")
        return True

    def transform(self) -> None:
        print("Transforming JSON data...")
        self.document["processed_at"] = PROCESSED_AT
        print("JSON transformation completed")

    def save(self) -> None:
        print("Saving processed JSON data...")
        print(f"  {json.dumps(self.document)}")
        print("JSON data saved to database")

    def handle_validation_error(self) -> None:
        print("JSON validation error - sending alert to admin")
