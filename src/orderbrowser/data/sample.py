"""Demo order set.

Ten hand-written orders sit at positions 10-19 of a 64-order list; the
rest are generated from a few rotating value lists.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List

from ..config import DELIVERY_OPTIONS, EMPTY_VALUE, STATUS_OPTIONS, config
from .store import OrderStore

SAMPLE_SIZE = 64

HAND_WRITTEN: List[Dict[str, Any]] = [
    {
        "id": "11", "ref": "QH29", "created": "15 Jul 2020 22:00",
        "customer": "Peter Kristiansen", "products": "Orbea Orca M30 🔁",
        "start": "08 Aug 2020 14:00", "end": "12 Aug 2020 14:00",
        "distribution": "Grøubøgata 1, Oslo", "status": "Cancelled", "delivery": "Cancelled",
        "price": "800.00 NOK", "notes": "Renewing subscription", "department": "Grøubøgata 1",
        "createdBy": "Camilla", "productTag": "Subscription", "delayed": False,
    },
    {
        "id": "12", "ref": "VB58", "created": "15 Jul 2020 21:00",
        "customer": "Ola Nordmann", "products": "Pinarello Gan Disk",
        "start": "07 Aug 2020 14:00", "end": "16 Aug 2020 14:00",
        "distribution": "Avdeling 16, Oslo", "status": "Booked", "delivery": "Ready to pickup",
        "price": "1,600.00 NOK", "department": "Avdeling 16",
        "createdBy": "Sindre", "productTag": "Road bike",
    },
    {
        "id": "13", "ref": "LH44", "created": "14 Jul 2020 20:00",
        "customer": "Viggo Aukland", "products": "S-Works Tarmac SL7",
        "start": "05 Aug 2020 14:00", "end": "08 Aug 2020 14:00",
        "distribution": "Grøubøgata 1", "status": "Booked", "delivery": "Delayed",
        "price": "645.00 NOK", "department": "Grøubøgata 1",
        "createdBy": "Camilla", "productTag": "Road bike", "delayed": True,
    },
    {
        "id": "14", "ref": "TS49", "created": "13 Jul 2020 20:00",
        "customer": "Merethe Meinig", "products": "Elite Direto XR, Schwalbe Ins…",
        "start": "06 Aug 2020 14:00", "end": "06 Aug 2020 20:00",
        "distribution": "Avdeling 16, Svolvær", "status": "In Cart", "delivery": "—",
        "price": "199.99 NOK", "department": "Avdeling 16",
        "createdBy": "Jonas", "productTag": "Accessories",
    },
    {
        "id": "15", "ref": "QE50", "created": "13 Jul 2020 20:00",
        "customer": "Edvin Joanssen", "products": "FELT Sport E-50 ⚡",
        "start": "05 Aug 2020 14:00", "end": "—",
        "distribution": "Grøubøgata 1", "status": "Closed", "delivery": "Picked up",
        "price": "399.00 NOK", "department": "Grøubøgata 1",
        "createdBy": "Camilla", "productTag": "E-bike",
    },
    {
        "id": "16", "ref": "ZM94", "created": "03 Aug 2020 10:21",
        "customer": "Admin", "products": "BH Atom 29",
        "start": "04 Aug 2020 08:45", "end": "—",
        "distribution": "Grøubøgata 1", "status": "Dropped", "delivery": "Cancelled",
        "price": "485.00 NOK", "department": "Grøubøgata 1",
        "createdBy": "System", "productTag": "Mountain",
    },
    {
        "id": "17", "ref": "MV33", "created": "28 Jul 2020 18:02",
        "customer": "Thorbjørn Bernsen", "products": "HJC Atara, Abus Hyban+",
        "start": "01 Aug 2020 12:30", "end": "03 Aug 2020 09:45",
        "distribution": "Avdeling 16, Oslo", "status": "Booked", "delivery": "Delayed",
        "price": "845.00 NOK", "department": "Avdeling 16",
        "createdBy": "Sindre", "productTag": "Accessories", "delayed": True,
    },
    {
        "id": "18", "ref": "AA23", "created": "28 Jul 2020 18:00",
        "customer": "Admin", "products": "Shimano 105 ST-R7000",
        "start": "29 Jul 2020 12:00", "end": "—",
        "distribution": "Ekebergveien 65", "status": "Test", "delivery": "Returned",
        "price": "399.00 NOK", "department": "Ekebergveien 65",
        "createdBy": "System", "productTag": "Components",
    },
    {
        "id": "19", "ref": "GR88", "created": "27 Jul 2020 19:40",
        "customer": "Per Thue", "products": "EYEN Kort 2-Pack",
        "start": "01 Aug 2020 12:30", "end": "03 Aug 2020 09:45",
        "distribution": "Grøubøgata 1", "status": "Request", "delivery": "To transport",
        "price": "512.00 NOK", "department": "Grøubøgata 1",
        "createdBy": "Camilla", "productTag": "Accessories",
    },
    {
        "id": "20", "ref": "NL06", "created": "27 Jul 2020 19:40",
        "customer": "Hallgrim Haukland", "products": "S-Works Shiv TT Disc",
        "start": "26 Jul 2020 12:00", "end": "24 Aug 2020 12:00",
        "distribution": "Grøubøgata 1", "status": "Booked", "delivery": "On checking",
        "price": "1,249.00 NOK", "department": "Grøubøgata 1",
        "createdBy": "Camilla", "productTag": "Triathlon",
    },
]

_HAND_WRITTEN_OFFSET = 10

_DEPARTMENTS = ["Grøubøgata 1", "Avdeling 16", "Ekebergveien 65", "Ekeberg Logistikk", "Distribution Hub"]
_CREATORS = ["Camilla", "Sindre", "Jonas", "System", "Helga"]
_TAGS = ["Road bike", "E-bike", "Accessories", "Components", "Subscription", "Logistics"]
_FIRST_CREATED = datetime(2020, 7, 1, 8, 0)


def generated_record(index: int) -> Dict[str, Any]:
    """Build the generated demo record at a list position."""
    fmt = config.app.date_format
    created = _FIRST_CREATED + timedelta(days=index)
    # Every third generated order has no end date
    end = EMPTY_VALUE if index % 3 == 0 else (created + timedelta(days=15)).strftime(fmt)
    delivery = DELIVERY_OPTIONS[index % len(DELIVERY_OPTIONS)]
    department = _DEPARTMENTS[index % len(_DEPARTMENTS)]
    return {
        "id": str(index + 1),
        "ref": f"GEN{index + 1:02d}",
        "created": created.strftime(fmt),
        "customer": f"Customer {index + 1}",
        "products": f"Product bundle {index + 1}",
        "start": (created + timedelta(days=10)).strftime(fmt),
        "end": end,
        "distribution": f"{department}, Oslo",
        "status": STATUS_OPTIONS[index % len(STATUS_OPTIONS)],
        "delivery": delivery,
        "price": f"{500 + index * 5:.2f} NOK",
        "department": department,
        "createdBy": _CREATORS[index % len(_CREATORS)],
        "productTag": _TAGS[index % len(_TAGS)],
        "delayed": delivery == "Delayed",
    }


def sample_records() -> List[Dict[str, Any]]:
    """All demo records, in store order."""
    records = []
    for index in range(SAMPLE_SIZE):
        if _HAND_WRITTEN_OFFSET <= index < _HAND_WRITTEN_OFFSET + len(HAND_WRITTEN):
            records.append(dict(HAND_WRITTEN[index - _HAND_WRITTEN_OFFSET]))
        else:
            records.append(generated_record(index))
    return records


def load_sample_store() -> OrderStore:
    return OrderStore.from_records(sample_records(), source="sample")
