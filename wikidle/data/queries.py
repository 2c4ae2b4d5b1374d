"""
SPARQL query templates for the Wikidata query service.

Placeholders use the {{NAME}} form and are filled by QueryBuilder.
"""

CANDIDATES_QUERY = """
SELECT ?lexeme ?lemma ?gender
       (GROUP_CONCAT(DISTINCT ?plural; separator=", ") AS ?plurals)
       (SAMPLE(?description) AS ?description)
       (SAMPLE(?image) AS ?image)
       (SAMPLE(?audio) AS ?audio)
       (GROUP_CONCAT(DISTINCT ?translation; separator=", ") AS ?translations)
WHERE {
    ?lexeme dct:language wd:{{LANGUAGE_QID}};
            wikibase:lexicalCategory wd:{{LEXICAL_CATEGORY}};
            wikibase:lemma ?lemma.

    OPTIONAL { ?lexeme wdt:P5185 ?gender. }
    OPTIONAL { ?lexeme wdt:P7296 ?plural. }
    OPTIONAL { ?lexeme schema:description ?description. FILTER(LANG(?description) = "{{LANGUAGE_CODE}}") }
    OPTIONAL { ?lexeme wdt:P18 ?image. }
    OPTIONAL { ?lexeme wdt:P443 ?audio. }
    OPTIONAL {
        ?lexeme ontolex:sense ?sense.
        ?sense skos:definition ?translation.
        FILTER(LANG(?translation) = "en")
    }

    FILTER(LANG(?lemma) = "{{LANGUAGE_CODE}}")
    FILTER(STRLEN(?lemma) >= {{MIN_LENGTH}} && STRLEN(?lemma) <= {{MAX_LENGTH}})
}
GROUP BY ?lexeme ?lemma ?gender
LIMIT {{LIMIT}}
"""
