"""Curated sculpture parks bundled with the application.

Order matters: the first entries double as the landing-page spotlight.
"""

CATALOG_ENTRIES: list[dict] = [
    # ── Netherlands & Belgium ──
    {"id": "nl-01", "name": "Kröller-Müller", "place": "Otterlo", "region": "Netherlands", "lat": 52.0951, "lng": 5.8197, "description": "Iconic sculpture garden on the Veluwe.", "tags": ["museum garden"]},
    {"id": "be-01", "name": "Middelheim", "place": "Antwerp", "region": "Belgium", "lat": 51.1821, "lng": 4.4150, "description": "World-class open-air sculpture museum."},
    {"id": "de-sk-01", "name": "Skulpturenpark Waldfrieden", "place": "Wuppertal", "region": "Germany", "lat": 51.2533, "lng": 7.1706, "description": "Wooded park created by Tony Cragg."},
    {"id": "it-01", "name": "Arte Sella", "place": "Borgo Valsugana", "region": "Italy", "lat": 46.0125, "lng": 11.5238, "description": "Nature and art in the Alps.", "tags": ["land-art"]},
    {"id": "fr-01", "name": "Château La Coste", "place": "Provence", "region": "France", "lat": 43.6475, "lng": 5.4950, "description": "Top architecture and art among the vineyards."},
    {"id": "es-03", "name": "Chillida Leku", "place": "Hernani", "region": "Spain", "lat": 43.2383, "lng": -1.9847, "description": "The life's work of Eduardo Chillida."},
    {"id": "it-02", "name": "Giardino dei Tarocchi", "place": "Capalbio", "region": "Italy", "lat": 42.4248, "lng": 11.4667, "description": "Colourful park by Niki de Saint Phalle.", "tags": ["interactive"]},
    {"id": "nl-05", "name": "Voorlinden", "place": "Wassenaar", "region": "Netherlands", "lat": 52.1189, "lng": 4.3314, "description": "Modern masters near the sea."},
    {"id": "nl-02", "name": "De Groene Kathedraal", "place": "Almere", "region": "Netherlands", "lat": 52.3217, "lng": 5.3200, "description": "Living land art made of poplar trees.", "tags": ["land-art"]},
    {"id": "nl-03", "name": "Observatorium", "place": "Lelystad", "region": "Netherlands", "lat": 52.5511, "lng": 5.5564, "description": "Land art by Robert Morris.", "tags": ["land-art", "solitary monument"]},
    {"id": "nl-04", "name": "Exposure", "place": "Lelystad", "region": "Netherlands", "lat": 52.5256, "lng": 5.4361, "description": "Antony Gormley's crouching man.", "tags": ["solitary monument"]},
    {"id": "nl-06", "name": "Beelden aan Zee", "place": "Scheveningen", "region": "Netherlands", "lat": 52.1114, "lng": 4.2817, "description": "Fairy-tale sculptures on the boulevard."},
    {"id": "nl-07", "name": "Land Art Delft", "place": "Delft", "region": "Netherlands", "lat": 51.9833, "lng": 4.3833, "description": "Where art meets engineering.", "tags": ["land-art"]},
    {"id": "nl-08", "name": "Aardzee", "place": "Zeewolde", "region": "Netherlands", "lat": 52.3500, "lng": 5.4500, "description": "Land art by Piet Slegers.", "tags": ["land-art", "solitary monument"]},
    {"id": "nl-15", "name": "Rijksmuseum Garden", "place": "Amsterdam", "region": "Netherlands", "lat": 52.3599, "lng": 4.8852, "description": "Rotating highlights in the museum garden."},
    {"id": "nl-17", "name": "Kasteel het Nijenhuis", "place": "Heino", "region": "Netherlands", "lat": 52.4333, "lng": 6.2333, "description": "Sculpture garden at the castle."},
    {"id": "be-02", "name": "Verbeke Foundation", "place": "Kemzeke", "region": "Belgium", "lat": 51.2183, "lng": 4.0628, "description": "Anarchic art landscape."},
    {"id": "be-06", "name": "Sart Tilman", "place": "Liège", "region": "Belgium", "lat": 50.5833, "lng": 5.5667, "description": "Open-air museum on the university campus."},
    {"id": "be-10", "name": "Beaufort Permanent", "place": "Belgian Coast", "region": "Belgium", "lat": 51.2000, "lng": 3.0000, "description": "Art along the coastline."},
    # ── Germany ──
    {"id": "de-bam-01", "name": "Bamberger Skulpturenweg", "place": "Bamberg Centre", "region": "Germany", "lat": 49.8917, "lng": 10.8864, "description": "Classic route through the UNESCO old town with international masters such as Botero."},
    {"id": "de-bam-03", "name": "Main-Donau Skulpturenweg", "place": "Bamberg Canal", "region": "Germany", "lat": 49.8820, "lng": 10.9020, "description": "An 8 km route along the canal with monumental works about water and technology."},
    {"id": "de-bam-02", "name": "Villa Dessauer Garden", "place": "Bamberg", "region": "Germany", "lat": 49.8875, "lng": 10.8922, "description": "Changing contemporary exhibitions in the garden of a fine town villa."},
    {"id": "de-nur-01", "name": "Neurenberg Zwinger", "place": "Nuremberg", "region": "Germany", "lat": 49.4478, "lng": 11.0822, "description": "Sculpture park along the city wall."},
    {"id": "de-ulm-01", "name": "Donaupark Ulm", "place": "Ulm", "region": "Germany", "lat": 48.4011, "lng": 9.9919, "description": "Modern sculpture on the Danube."},
    {"id": "de-mun-01", "name": "Pinakothek Garden", "place": "Munich", "region": "Germany", "lat": 48.1472, "lng": 11.5722, "description": "Highlights of modern art history."},
    {"id": "de-sk-02", "name": "Skulpturenpark Köln", "place": "Cologne", "region": "Germany", "lat": 50.9556, "lng": 6.9711, "description": "Changing exhibitions by the Rhine."},
    {"id": "de-in-01", "name": "Insel Hombroich", "place": "Neuss", "region": "Germany", "lat": 51.1472, "lng": 6.6583, "description": "A unique blend of architecture and nature."},
    {"id": "de-ms-01", "name": "Skulptur Projekte Münster", "place": "Münster", "region": "Germany", "lat": 51.9607, "lng": 7.6261, "description": "The whole city as a sculpture park."},
    {"id": "de-ha-01", "name": "Stiftung Kunstlandschaft", "place": "Hamburg", "region": "Germany", "lat": 53.5500, "lng": 9.9933, "description": "Many sculptures spread across the city."},
    {"id": "de-ma-01", "name": "Luisenpark", "place": "Mannheim", "region": "Germany", "lat": 49.4825, "lng": 8.4975, "description": "Pleasant park with international art."},
    {"id": "de-dr-01", "name": "Zwinger Garden", "place": "Dresden", "region": "Germany", "lat": 51.0531, "lng": 13.7339, "description": "Baroque sculpture."},
    {"id": "de-bi-01", "name": "Kunsthalle Bielefeld Garden", "place": "Bielefeld", "region": "Germany", "lat": 52.0200, "lng": 8.5250, "description": "Major works by Moore and Rodin."},
    # ── Spain ──
    {"id": "es-01", "name": "Museo Lagomar", "place": "Nazaret (Lanzarote)", "region": "Spain", "lat": 29.0350, "lng": -13.5656, "description": "Architecture and art in volcanic caves."},
    {"id": "es-02", "name": "Jardín de Cactus", "place": "Guatiza (Lanzarote)", "region": "Spain", "lat": 29.0560, "lng": -13.4862, "description": "Cactus garden with monumental sculptures by Manrique."},
    {"id": "es-04", "name": "Museo Vostell Malpartida", "place": "Malpartida de Cáceres", "region": "Spain", "lat": 39.3900, "lng": -6.5200, "description": "Fluxus and land art at Los Barruecos.", "tags": ["land-art"]},
    {"id": "es-05", "name": "Parque Güell", "place": "Barcelona", "region": "Spain", "lat": 41.4147, "lng": 2.1526, "description": "Gaudí's iconic park."},
    {"id": "es-06", "name": "Fuerteventura Sculpture Park", "place": "Puerto del Rosario", "region": "Spain", "lat": 28.4969, "lng": -13.8653, "description": "More than 100 sculptures in public space."},
    {"id": "es-07", "name": "Fundació Pilar i Joan Miró", "place": "Palma de Mallorca", "region": "Spain", "lat": 39.5539, "lng": 2.6106, "description": "Sculpture garden at Miró's studio."},
    {"id": "es-08", "name": "Peine del Viento", "place": "San Sebastián", "region": "Spain", "lat": 43.3214, "lng": -2.0061, "description": "Chillida's famous iron sculptures on the coast.", "tags": ["solitary monument"]},
    {"id": "es-10", "name": "NMAC Foundation", "place": "Vejer de la Frontera", "region": "Spain", "lat": 36.2528, "lng": -5.9667, "description": "Contemporary art in a pine forest."},
    {"id": "es-11", "name": "Elogio del Horizonte", "place": "Gijón", "region": "Spain", "lat": 43.5511, "lng": -5.6631, "description": "Monumental concrete sculpture by Chillida.", "tags": ["solitary monument"]},
    {"id": "es-14", "name": "Museo de Escultura al Aire Libre", "place": "Madrid", "region": "Spain", "lat": 40.4350, "lng": -3.6889, "description": "Abstract sculptures beneath a flyover."},
    {"id": "es-15", "name": "Meiac Garden", "place": "Badajoz", "region": "Spain", "lat": 38.8781, "lng": -6.9706, "description": "Sculptures on the Portuguese border."},
    {"id": "es-16", "name": "Fundación Montenmedio", "place": "Cádiz", "region": "Spain", "lat": 36.2844, "lng": -5.9239, "description": "Land art of international standing.", "tags": ["land-art"]},
    {"id": "es-17", "name": "Parque Juan Carlos I", "place": "Madrid", "region": "Spain", "lat": 40.4611, "lng": -3.6128, "description": "Large park with 19 monumental works."},
    {"id": "es-18", "name": "Can Mario Garden", "place": "Palafrugell", "region": "Spain", "lat": 41.9175, "lng": 3.1633, "description": "Modern Catalan sculpture garden."},
    {"id": "es-19", "name": "Parque Alameda", "place": "Santiago de Compostela", "region": "Spain", "lat": 42.8778, "lng": -8.5491, "description": "Historic park with sculptural surprises."},
    {"id": "es-20", "name": "IVAM Garden", "place": "Valencia", "region": "Spain", "lat": 39.4800, "lng": -0.3833, "description": "Modern sculpture at the IVAM museum."},
    {"id": "es-24", "name": "Parque de las Llamas", "place": "Santander", "region": "Spain", "lat": 43.4739, "lng": -3.7933, "description": "Modern wetland park with sculptural accents."},
    {"id": "es-25", "name": "Jardines de Sabatini", "place": "Madrid", "region": "Spain", "lat": 40.4194, "lng": -3.7142, "description": "Neoclassical statues by the Royal Palace."},
    {"id": "es-29", "name": "Marbella Sculpture Way", "place": "Marbella", "region": "Spain", "lat": 36.5083, "lng": -4.8856, "description": "Avenida del Mar with Dalí sculptures."},
    {"id": "es-30", "name": "Parque de Doña Casilda", "place": "Bilbao", "region": "Spain", "lat": 43.2661, "lng": -2.9414, "description": "Historic heart of Bilbao with several sculptures."},
    {"id": "es-32", "name": "Museo de Escultura Leganés", "place": "Madrid Region", "region": "Spain", "lat": 40.3283, "lng": -3.7656, "description": "Large collection of modern Spanish sculpture."},
    {"id": "es-34", "name": "Torre Hércules Park", "place": "A Coruña", "region": "Spain", "lat": 43.3858, "lng": -8.4064, "description": "Mythological sculpture park around the Roman tower."},
    {"id": "es-38", "name": "Fundación Fran Daurel", "place": "Barcelona", "region": "Spain", "lat": 41.3689, "lng": 2.1472, "description": "Large sculpture garden in the Poble Espanyol."},
    {"id": "es-40", "name": "Guggenheim Garden", "place": "Bilbao", "region": "Spain", "lat": 43.2686, "lng": -2.9342, "description": "Famous works by Koons and Bourgeois."},
    {"id": "es-41", "name": "Euskadi Park", "place": "Bilbao", "region": "Spain", "lat": 43.2680, "lng": -2.9380, "description": "Sculptures by Chillida and Serra."},
    {"id": "es-48", "name": "Miró Park", "place": "Barcelona", "region": "Spain", "lat": 41.3772, "lng": 2.1469, "description": "Home of the giant 'Woman and Bird'.", "tags": ["solitary monument"]},
    # ── France ──
    {"id": "fr-02", "name": "Maeght Foundation", "place": "Saint-Paul-de-Vence", "region": "France", "lat": 43.7008, "lng": 7.1147, "description": "Legendary garden with Miró."},
    {"id": "fr-03", "name": "Musée de la Sculpture en Plein Air", "place": "Paris", "region": "France", "lat": 48.8475, "lng": 2.3614, "description": "Sculptures along the Seine."},
]
