"""Default seed locations and the embedded Iberian beach list used by search."""

from beachcast.config.schema import LocationConfig

DEFAULT_LOCATIONS: list[LocationConfig] = [
    LocationConfig(
        id="pt-caparica",
        name="Costa da Caparica",
        latitude=38.6413,
        longitude=-9.2386,
        country="Portugal",
        state="Setúbal",
        is_favorite=True,
    ),
    LocationConfig(
        id="pt-guincho",
        name="Praia do Guincho",
        latitude=38.7329,
        longitude=-9.4730,
        country="Portugal",
        state="Lisboa",
    ),
]

# (name, display name, latitude, longitude, country, region)
IBERIAN_BEACHES: list[tuple[str, str, float, float, str, str]] = [
    # Portugal: Lisboa / Setúbal
    ("Costa da Caparica", "Costa da Caparica", 38.6413, -9.2386, "Portugal", "Setúbal"),
    ("Praia do Guincho", "Praia do Guincho", 38.7329, -9.4730, "Portugal", "Lisboa"),
    ("Praia de Carcavelos", "Praia de Carcavelos", 38.6795, -9.3326, "Portugal", "Lisboa"),
    ("Praia de Cascais", "Praia de Cascais", 38.7000, -9.4167, "Portugal", "Lisboa"),
    ("Praia de Estoril", "Praia de Estoril", 38.7167, -9.4000, "Portugal", "Lisboa"),
    ("Praia de Ericeira", "Praia de Ericeira", 38.9667, -9.4167, "Portugal", "Lisboa"),
    ("Praia de Tróia", "Praia de Tróia", 38.4833, -8.8833, "Portugal", "Setúbal"),
    ("Praia de Sesimbra", "Praia de Sesimbra", 38.4333, -9.1000, "Portugal", "Setúbal"),
    # Portugal: Algarve
    ("Praia da Marinha", "Praia da Marinha", 37.0869, -8.4167, "Portugal", "Algarve"),
    ("Praia de Benagil", "Praia de Benagil", 37.0897, -8.4247, "Portugal", "Algarve"),
    ("Praia dos Coelhos", "Praia dos Coelhos", 37.0869, -8.4167, "Portugal", "Algarve"),
    ("Praia da Rocha", "Praia da Rocha", 37.1189, -8.5333, "Portugal", "Algarve"),
    ("Praia de Lagos", "Praia de Lagos", 37.1028, -8.6733, "Portugal", "Algarve"),
    ("Praia de Albufeira", "Praia de Albufeira", 37.0894, -8.2500, "Portugal", "Algarve"),
    ("Praia de Faro", "Praia de Faro", 37.0144, -7.9350, "Portugal", "Algarve"),
    ("Praia de Tavira", "Praia de Tavira", 37.1278, -7.6472, "Portugal", "Algarve"),
    ("Praia de Sagres", "Praia de Sagres", 37.0083, -8.9433, "Portugal", "Algarve"),
    ("Praia de Carvoeiro", "Praia de Carvoeiro", 37.1000, -8.4667, "Portugal", "Algarve"),
    ("Praia de Portimão", "Praia de Portimão", 37.1333, -8.5333, "Portugal", "Algarve"),
    ("Praia de Vilamoura", "Praia de Vilamoura", 37.0833, -8.1167, "Portugal", "Algarve"),
    ("Praia de Quarteira", "Praia de Quarteira", 37.0667, -8.1000, "Portugal", "Algarve"),
    ("Praia de Olhos de Água", "Praia de Olhos de Água", 37.0833, -8.1833, "Portugal", "Algarve"),
    ("Praia de São Rafael", "Praia de São Rafael", 37.0667, -8.2500, "Portugal", "Algarve"),
    ("Praia de Galé", "Praia de Galé", 37.0833, -8.2333, "Portugal", "Algarve"),
    ("Praia de Armação de Pêra", "Praia de Armação de Pêra", 37.1000, -8.3500, "Portugal", "Algarve"),
    ("Praia de Ferragudo", "Praia de Ferragudo", 37.1167, -8.5167, "Portugal", "Algarve"),
    ("Praia de Alvor", "Praia de Alvor", 37.1333, -8.6000, "Portugal", "Algarve"),
    ("Praia de Burgau", "Praia de Burgau", 37.0667, -8.7833, "Portugal", "Algarve"),
    ("Praia de Salema", "Praia de Salema", 37.0667, -8.8167, "Portugal", "Algarve"),
    ("Praia de Luz", "Praia de Luz", 37.0833, -8.7333, "Portugal", "Algarve"),
    # Portugal: Alentejo / Centro / Norte
    ("Praia de Monte Clérigo", "Praia de Monte Clérigo", 37.3167, -8.8500, "Portugal", "Alentejo"),
    ("Praia de Odeceixe", "Praia de Odeceixe", 37.4333, -8.7833, "Portugal", "Alentejo"),
    ("Praia de Zambujeira do Mar", "Praia de Zambujeira do Mar", 37.5167, -8.7833, "Portugal", "Alentejo"),
    ("Praia de Vila Nova de Milfontes", "Praia de Vila Nova de Milfontes", 37.7167, -8.7833, "Portugal", "Alentejo"),
    ("Praia de Peniche", "Praia de Peniche", 39.3500, -9.3833, "Portugal", "Leiria"),
    ("Praia de Nazaré", "Praia de Nazaré", 39.6167, -9.0833, "Portugal", "Leiria"),
    ("Praia de Figueira da Foz", "Praia de Figueira da Foz", 40.1500, -8.8500, "Portugal", "Coimbra"),
    ("Praia de Aveiro", "Praia de Aveiro", 40.6333, -8.6500, "Portugal", "Aveiro"),
    ("Praia de Espinho", "Praia de Espinho", 41.0167, -8.6333, "Portugal", "Aveiro"),
    ("Praia de Matosinhos", "Praia de Matosinhos", 41.1833, -8.7000, "Portugal", "Porto"),
    ("Praia de Póvoa de Varzim", "Praia de Póvoa de Varzim", 41.3833, -8.7667, "Portugal", "Porto"),
    ("Praia de Viana do Castelo", "Praia de Viana do Castelo", 41.7000, -8.8333, "Portugal", "Viana do Castelo"),
    # Spain
    ("Barceloneta Beach", "Barceloneta Beach", 41.3790, 2.1893, "Spain", "Catalonia"),
    ("Sitges", "Sitges", 41.2370, 1.8039, "Spain", "Catalonia"),
    ("La Concha", "La Concha (San Sebastián)", 43.3183, -1.9869, "Spain", "Basque Country"),
    ("Zurriola", "Zurriola (San Sebastián)", 43.3262, -1.9748, "Spain", "Basque Country"),
    ("Playa de Somo", "Playa de Somo", 43.4519, -3.7447, "Spain", "Cantabria"),
    ("Playa de Riazor", "Playa de Riazor (A Coruña)", 43.3700, -8.4117, "Spain", "Galicia"),
    ("La Caleta", "La Caleta (Cádiz)", 36.5363, -6.2994, "Spain", "Andalusia"),
    ("Tarifa", "Tarifa", 36.0130, -5.6060, "Spain", "Andalusia"),
]
