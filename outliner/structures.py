# outliner/structures.py
"""
Section templates used to build an outline.

Each language has a fixed, ordered base structure (the canonical narrative of a
deck) and a shorter fallback structure used to pad outlines that need more
sections than the base structure plus the prompt keywords provide.
"""
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from .config import DEFAULT_LANGUAGE, LANGUAGES

Template = Callable[[str], str]


@dataclass(frozen=True)
class StructureLibrary:
    code: str
    fallback_topic: str
    base: Tuple[Template, ...]
    fallback: Tuple[Template, ...]
    subtopic_format: str
    section_format: str
    new_section_format: str
    new_section: str

    def base_sections(self, topic: str) -> list:
        return [template(topic) for template in self.base]

    def fallback_section(self, index: int, topic: str) -> str:
        """Fallback section for position `index`, wrapping around the fallback list."""
        return self.fallback[index % len(self.fallback)](topic)

    def subtopic(self, number: int, keyword: str, topic: str) -> str:
        return self.subtopic_format.format(number=number, keyword=keyword, topic=topic)

    def section_label(self, number: int) -> str:
        return self.section_format.format(number=number)

    def new_section_label(self, number: int) -> str:
        return self.new_section_format.format(number=number)


ENGLISH = StructureLibrary(
    code="en",
    fallback_topic="Your Main Topic",
    base=(
        lambda topic: f"Cover and main title: {topic}",
        lambda topic: "Table of contents of the presentation",
        lambda topic: f"Introduction to the topic: {topic}",
        lambda topic: f"Historical context and background of {topic}",
        lambda topic: f"Key points and main characteristics of {topic}",
        lambda topic: f"Impact, benefits or relevance of {topic}",
        lambda topic: f"Examples, case studies or evidence about {topic}",
        lambda topic: f"Conclusions and key messages of {topic}",
    ),
    fallback=(
        lambda topic: f"Timeline or evolution of {topic}",
        lambda topic: f"Challenges and opportunities related to {topic}",
        lambda topic: f"Resources, tools or recommendations to go deeper into {topic}",
        lambda topic: "Questions for the audience or open discussion",
        lambda topic: "Sources consulted, acknowledgements and final credits",
    ),
    subtopic_format="Subtopic {number}: {keyword} in the context of {topic}",
    section_format="Section {number}",
    new_section_format="New section {number}",
    new_section="New section",
)

SPANISH = StructureLibrary(
    code="es",
    fallback_topic="Tu Tema Principal",
    base=(
        lambda topic: f"Portada y título principal: {topic}",
        lambda topic: "Índice general de la presentación",
        lambda topic: f"Introducción al tema: {topic}",
        lambda topic: f"Contexto histórico y antecedentes de {topic}",
        lambda topic: f"Puntos clave y características principales de {topic}",
        lambda topic: f"Impacto, beneficios o relevancia de {topic}",
        lambda topic: f"Ejemplos, casos de estudio o evidencias sobre {topic}",
        lambda topic: f"Conclusiones y mensajes clave de {topic}",
    ),
    fallback=(
        lambda topic: f"Cronograma o evolución de {topic}",
        lambda topic: f"Retos y oportunidades relacionados con {topic}",
        lambda topic: f"Recursos, herramientas o recomendaciones para profundizar en {topic}",
        lambda topic: "Preguntas para la audiencia o espacio para discusión",
        lambda topic: "Fuentes consultadas, agradecimientos y créditos finales",
    ),
    subtopic_format="Subtema {number}: {keyword} en el contexto de {topic}",
    section_format="Sección {number}",
    new_section_format="Nueva sección {number}",
    new_section="Nueva sección",
)

LIBRARIES: Dict[str, StructureLibrary] = {
    ENGLISH.code: ENGLISH,
    SPANISH.code: SPANISH,
}


def resolve_language(language: str) -> str:
    """
    Map a language code or display name ("es", "Español", "english") to a
    library code. Unknown values resolve to the default language.
    """
    value = (language or "").strip()
    if value.lower() in LIBRARIES:
        return value.lower()
    for name, code in LANGUAGES.items():
        if name.lower() == value.lower():
            return code
    return DEFAULT_LANGUAGE


def get_library(language: str = DEFAULT_LANGUAGE) -> StructureLibrary:
    return LIBRARIES[resolve_language(language)]
