# ABOUTME: Canned catalog source responses for Livraria tests.
# ABOUTME: Delimited raw strings, "livros" JSON payloads, and Groq chat-completions envelopes.

import json
from typing import Any

TOLSTOY_DELIMITED = (
    "{A Guerra e a Paz,Liev Tolstói,Romance,Uma saga,1869,Editora X,Rússia,1225,978-1-234}"
)

TWO_TOLSTOY_DELIMITED = (
    "{A Guerra e a Paz,Liev Tolstói,Romance,Uma saga,1869,Editora X,Rússia,1225,978-1-234},"
    "{Anna Kariênina,Liev Tolstói,Romance,Um drama, em oito partes,1877,Editora X,Rússia,864,"
    "978-1-999}"
)

MIXED_DELIMITED = (
    "{Capitães da Areia,Jorge Amado,Ficção,Meninos de rua em Salvador,1937,"
    "Companhia das Letras,Brasil,280,978-85-359-0001-1},"
    "{Título,Autor,Genero},"
    "{Gabriela,Jorge Amado,Romance,Ilhéus nos anos 1920,ano,Record,Brasil,424,978-85-0000-0}"
)

LIVROS_PAYLOAD: dict[str, Any] = {
    "livros": [
        {
            "titulo": "Capitães da Areia",
            "autor": "Jorge Amado",
            "genero": "Ficção, Aventura",
            "sinopse": "Meninos de rua em Salvador, liderados por Pedro Bala.",
            "anodepublicacao": 1937,
            "editora": "Companhia das Letras",
            "origem": "Brasil",
            "numerodepaginas": 280,
            "ISBN": "978-8535914061",
        },
        {
            "titulo": "Gabriela, Cravo e Canela",
            "autor": "Jorge Amado",
            "genero": "Romance",
            "sinopse": "A chegada de Gabriela a Ilhéus.",
            "anodepublicacao": "1958",
            "editora": "Companhia das Letras",
            "origem": "Brasil",
            "numerodepaginas": "424",
            "ISBN": "978-8535911787",
        },
    ]
}


def chat_completion(content: str) -> dict[str, Any]:
    """Wrap content the way the Groq chat-completions API does."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "model": "openai/gpt-oss-120b",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


GROQ_JSON_RESPONSE = chat_completion(json.dumps(LIVROS_PAYLOAD, ensure_ascii=False))

GROQ_FENCED_RESPONSE = chat_completion(
    "```json\n" + json.dumps(LIVROS_PAYLOAD, ensure_ascii=False) + "\n```"
)
