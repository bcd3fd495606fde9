"""Record classes shared by the test modules."""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, List, Optional

from sheetmap import Column, column, order, sheet, workbook


# Library scenario ----------------------------------------------------------

@dataclass
class Author:
    name: str
    genres: List[str] = field(default_factory=list)


@dataclass
class Book:
    title: str
    author: Optional[Author] = column(nested=True, default=None)
    price: Optional[float] = column(number_format="currency", default=None)


@workbook
@dataclass
class Library:
    books: List[Book] = field(default_factory=list)


def build_library() -> Library:
    return Library(books=[
        Book("The Hobbit", Author("J.R.R. Tolkien", ["Fantasy", "Adventure"]), 14.99),
        Book(
            "Harry Potter and the Sorcerer's Stone",
            Author("J.K. Rowling", ["Fantasy", "Drama", "Young Adult"]),
            19.99,
        ),
    ])


def build_author() -> Author:
    return Author("Not a workbook")


@order("title", "author", "publication_date", "price")
@dataclass
class DatedBook:
    title: str
    price: float = column(number_format="[$$-409]#,##0;-[$$-409]#,##0", default=0.0)
    author: Optional[Author] = column(nested=True, default=None)
    publication_date: Optional[date] = column(
        name="Date of Publication", number_format="dd/mm/yyyy", default=None
    )


@workbook
@dataclass
class Bookshop:
    catalogue: List[DatedBook] = sheet(name="Catalogue: 2024/25", default_factory=list)


# Stores --------------------------------------------------------------------

@dataclass
class Details:
    city: str
    zip_code: str
    country: str


@dataclass
class Location:
    area: str
    state: str
    details: Optional[Details] = column(nested=True, default=None)
    phones: List[str] = field(default_factory=list)


@dataclass
class Specs:
    processor: str
    memory: str
    storage: str


@dataclass
class Product:
    id: int
    name: str
    price: float
    specs: Optional[Specs] = column(nested=True, default=None)


@dataclass
class Employee:
    id: int
    name: str
    role: str


@dataclass
class Store:
    name: str
    location: Optional[Location] = column(nested=True, default=None)
    products: Optional[List[Product]] = None
    employees: Optional[List[Employee]] = None
    hours: Optional[List[str]] = None


def build_stores() -> List[Store]:
    return [
        Store(
            "Tech Store",
            Location(
                "Downtown",
                "NY",
                Details("New York", "91101", "US"),
                ["2122222222", "1234567890"],
            ),
            [
                Product(1, "Laptop", 999.99, Specs("Intel i7", "16GB", "512GB SSD")),
                Product(2, "Smartphone", 799.99, Specs("Snapdragon 888", "8GB", "128GB")),
            ],
            [Employee(1, "Alice", "Manager"), Employee(2, "Bob", "Sales Associate")],
            ["9:00 AM - 5:00 PM", "9:00 AM - 6:00 PM", "10:00 AM - 4:00 PM"],
        ),
        Store("Apparel"),
    ]


# Eligibility ---------------------------------------------------------------

class Colour(Enum):
    RED = "red"
    BLUE = "blue"


@order("b", "a", "unknown")
@dataclass
class Ordered:
    a: int
    b: str
    c: float


@dataclass
class Mixed:
    label: str
    count: int
    ratio: float
    active: bool
    tags: List[str]
    attributes: Dict[str, str]
    payload: bytes
    colour: Colour
    author: Author
    opaque: Any = column(nested=True, default=None)
    _secret: str = "hidden"
    kind: ClassVar[str] = "mixed"


@dataclass
class Base:
    inherited: str = "base"


@dataclass
class Derived(Base):
    own: str = "derived"


class Plant:
    """Plain class described through Annotated markers."""
    plant_type: Annotated[str, Column(name="Plant")]
    height_cm: Annotated[Optional[float], Column(number_format="0.0")]

    def __init__(self, plant_type, height_cm=None):
        self.plant_type = plant_type
        self.height_cm = height_cm


@dataclass
class Animal:
    animal_name: str
    home: Optional[Location] = column(nested=True, default=None)


@workbook(delimiter="_")
@order("plant_variants", "animals", "notes", "typo")
@dataclass
class NatureReserve:
    animals: List[Animal] = sheet(name="LiveAnimals", default_factory=list)
    plant_variants: List[Plant] = field(default_factory=list)
    empty_list: List[Animal] = field(default_factory=list)
    notes: Optional[List[str]] = None
    title: str = "reserve"


class NotAWorkbook:
    items: List[str]

    def __init__(self):
        self.items = ["a"]


class InheritedWorkbook(Library):
    pass


@dataclass
class Event:
    name: str
    dates: List[date] = column(number_format="dd/mm/yyyy", default_factory=list)


@dataclass
class Tagged:
    tags: Optional[List[str]] = None


@dataclass
class Parcel:
    tracking: int = column(number_format="00000", default=0)
    weight: int = column(number_format="0", default=0)


@workbook
@dataclass
class Depot:
    parcels: List[Parcel] = field(default_factory=list)


@workbook
@dataclass
class LongNames:
    first: List[Plant] = sheet(name="Animals of the northern wetlands", default_factory=list)
    second: List[Plant] = sheet(name="Animals of the northern wetlands", default_factory=list)
