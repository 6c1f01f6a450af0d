# ABOUTME: Groq chat-completions implementation of the BookSearchSource protocol.
# ABOUTME: Prompts a web-search-enabled model for a "livros" JSON catalog and parses the reply.

import logging
from typing import Any

from livraria.config import LivrariaConfig
from livraria.errors import InputFormatError, SourceUnavailableError
from livraria.metadata.http import HttpClient
from livraria.metadata.parser import parse_catalog_text
from livraria.metadata.types import BookRecord

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
Você é um assistente de catalogação de livros extremamente rápido e eficiente que utiliza \
busca na web para obter dados precisos e atualizados.
Sua resposta DEVE ser um objeto JSON válido e nada mais.
O JSON deve ter uma única chave "livros", que contém uma lista de objetos de livros.
Cada objeto de livro deve ter as seguintes chaves: "titulo", "autor", "genero", "sinopse", \
"anodepublicacao", "editora", "origem", "numerodepaginas", "ISBN".
Para o ISBN, forneça o ISBN-13 sempre que possível. Para o número de páginas, use uma \
edição comum como referência.
Exemplo de formato de saída:
{ "livros": [ { "titulo": "O Senhor dos Anéis", "autor": "J.R.R. Tolkien", \
"genero": "Fantasia", "sinopse": "Uma jornada para destruir um anel poderoso.", \
"anodepublicacao": 1954, "editora": "Allen & Unwin", "origem": "Reino Unido", \
"numerodepaginas": 423, "ISBN": "978-0618640157" } ] }
Não adicione nenhum texto, explicação ou formatação fora do objeto JSON principal e \
NÃO DEIXE FALTANDO NENHUM PARÂMETRO!
"""


def build_author_query(author: str) -> str:
    """Natural-language request for every book by an author."""
    return f"cadastre todos os livros do autor {author.strip()}"


def extract_content(response: dict[str, Any]) -> str:
    """Pull choices[0].message.content out of a chat-completions response.

    Raises:
        SourceUnavailableError: If the response does not have that shape.
    """
    choices = response.get("choices")
    if not isinstance(choices, list) or not choices:
        raise SourceUnavailableError("Groq response has no choices")
    message = choices[0].get("message") if isinstance(choices[0], dict) else None
    content = message.get("content") if isinstance(message, dict) else None
    if not isinstance(content, str):
        raise SourceUnavailableError("Groq response has no message content")
    return content


class GroqBookSource:
    """Book source backed by the Groq chat-completions API.

    The model is asked for JSON but a delimited reply is accepted too;
    see parse_catalog_text. Uses a dependency-injected HttpClient.
    """

    def __init__(self, http_client: HttpClient, config: LivrariaConfig) -> None:
        self._http = http_client
        self._config = config

    @property
    def name(self) -> str:
        return "groq"

    def build_request(self, query: str) -> dict[str, Any]:
        """Request body for one catalog query."""
        return {
            "model": self._config.groq_model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": query},
            ],
            "compound_custom": {"tools": {"enabled_tools": ["web_search"]}},
            "temperature": self._config.temperature,
            "max_tokens": self._config.max_tokens,
            "stream": False,
        }

    def search_books(self, query: str) -> list[BookRecord]:
        """Ask the model for books matching the query.

        Raises:
            ConfigurationError: If no API key is configured.
            SourceUnavailableError: On HTTP failure, an unexpected response
                shape, or content that is JSON without a "livros" array.
        """
        api_key = self._config.require_api_key()
        logger.info("Querying %s: %s", self.name, query)

        response = self._http.post_json(
            self._config.groq_api_url,
            self.build_request(query),
            headers={"Authorization": f"Bearer {api_key}"},
        )
        content = extract_content(response)

        try:
            records = parse_catalog_text(content)
        except InputFormatError as exc:
            raise SourceUnavailableError(
                f"Unusable catalog payload from {self.name}: {exc}"
            ) from exc

        logger.info("%s returned %d record(s)", self.name, len(records))
        return records
