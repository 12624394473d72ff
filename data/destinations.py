# data/destinations.py
from __future__ import annotations
from typing import Dict, List

from models.destination import Destination, Ratings
from utils.errors import NotFoundError

DESTINATIONS: List[Destination] = [
    Destination(
        id="dest-001",
        name="Kyoto",
        country="Japão",
        description="Antiga capital do Japão, conhecida por seus templos históricos, jardins tradicionais, e a experiência da cultura japonesa autêntica.",
        image_url="https://images.unsplash.com/photo-1493976040374-85c8e12f0c0e",
        tags=("cultura", "história", "templos", "jardins", "tradicional"),
        ratings=Ratings(culture=9.5, nature=8.0, food=9.0, adventure=6.5, relaxation=8.5),
        best_time_to_visit=("março", "abril", "outubro", "novembro"),
        average_cost="medium",
    ),
    Destination(
        id="dest-002",
        name="Costa Rica",
        country="Costa Rica",
        description="Paraíso natural com biodiversidade impressionante, florestas tropicais, vulcões ativos e praias exuberantes para os amantes da natureza.",
        image_url="https://images.unsplash.com/photo-1518182170546-07661fd94144",
        tags=("natureza", "fauna", "floresta", "praia", "aventura"),
        ratings=Ratings(culture=7.0, nature=9.8, food=7.5, adventure=9.2, relaxation=8.0),
        best_time_to_visit=("dezembro", "janeiro", "fevereiro", "março", "abril"),
        average_cost="medium",
    ),
    Destination(
        id="dest-003",
        name="Porto",
        country="Portugal",
        description="Cidade histórica com arquitetura deslumbrante, famosa por seu vinho do porto, comida deliciosa e um charme autêntico português.",
        image_url="https://images.unsplash.com/photo-1555881400-74d7acaacd8b",
        tags=("vinho", "arquitetura", "gastronomia", "história", "cultura"),
        ratings=Ratings(culture=9.0, nature=7.0, food=9.5, adventure=6.0, relaxation=8.0),
        best_time_to_visit=("maio", "junho", "setembro", "outubro"),
        average_cost="medium",
    ),
    Destination(
        id="dest-004",
        name="Ilha de Santorini",
        country="Grécia",
        description="Ilha vulcânica famosa por suas casas brancas com telhados azuis, pôr do sol espetacular e vistas impressionantes do Mar Mediterrâneo.",
        image_url="https://images.unsplash.com/photo-1570077188670-e3a8d69ac5ff",
        tags=("ilha", "romântico", "vistas", "praia", "gastronomia"),
        ratings=Ratings(culture=8.0, nature=8.5, food=8.0, adventure=6.5, relaxation=9.5),
        best_time_to_visit=("abril", "maio", "junho", "setembro", "outubro"),
        average_cost="high",
    ),
    Destination(
        id="dest-005",
        name="Marrakech",
        country="Marrocos",
        description="Cidade vibrante conhecida por seus mercados tradicionais (souks), palácios históricos e atmosfera cultural única entre o deserto e as montanhas.",
        image_url="https://images.unsplash.com/photo-1597212618440-806262de4f6b",
        tags=("mercados", "exótico", "cultura", "história", "arquitetura"),
        ratings=Ratings(culture=9.5, nature=7.0, food=8.5, adventure=8.0, relaxation=7.0),
        best_time_to_visit=("março", "abril", "maio", "outubro", "novembro"),
        average_cost="low",
    ),
    Destination(
        id="dest-006",
        name="Nova Zelândia",
        country="Nova Zelândia",
        description="País com paisagens de tirar o fôlego, desde montanhas nevadas até praias intocadas e florestas primitivas, perfeito para aventureiros.",
        image_url="https://images.unsplash.com/photo-1493606278519-11aa9f86e40a",
        tags=("natureza", "aventura", "montanhas", "trekking", "paisagens"),
        ratings=Ratings(culture=7.5, nature=10.0, food=7.5, adventure=9.8, relaxation=8.0),
        best_time_to_visit=("dezembro", "janeiro", "fevereiro", "março"),
        average_cost="high",
    ),
    Destination(
        id="dest-007",
        name="Budapeste",
        country="Hungria",
        description="Capital húngara cortada pelo Rio Danúbio, conhecida por sua arquitetura histórica, banhos termais e cena gastronômica emergente.",
        image_url="https://images.unsplash.com/photo-1551867633-194f125bcc72",
        tags=("arquitetura", "história", "termas", "cultura", "gastronomia"),
        ratings=Ratings(culture=8.5, nature=6.5, food=8.0, adventure=6.0, relaxation=8.5),
        best_time_to_visit=("abril", "maio", "setembro", "outubro"),
        average_cost="low",
    ),
    Destination(
        id="dest-008",
        name="Ilha de Bali",
        country="Indonésia",
        description="Ilha paradisíaca com praias de areia branca, templos hindus, terraços de arroz e uma cultura única que mistura espiritualidade e relaxamento.",
        image_url="https://images.unsplash.com/photo-1537996194471-e657df975ab4",
        tags=("praia", "cultura", "templos", "natureza", "relaxamento"),
        ratings=Ratings(culture=8.5, nature=9.0, food=8.0, adventure=7.5, relaxation=9.5),
        best_time_to_visit=("abril", "maio", "junho", "setembro", "outubro"),
        average_cost="low",
    ),
]

_BY_ID: Dict[str, Destination] = {d.id: d for d in DESTINATIONS}


def all_destinations() -> List[Destination]:
    # copy so callers can't reorder the catalog
    return list(DESTINATIONS)


def get_destination(destination_id: str) -> Destination:
    try:
        return _BY_ID[destination_id]
    except KeyError:
        raise NotFoundError(destination_id) from None
