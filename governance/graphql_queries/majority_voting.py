# Queries shared by the majority voting plugins. `entity` is the subgraph
# entity prefix (tokenVoting or addresslistVoting); `weighted` adds the per
# voter voting power and the governance token, which only TokenVoting indexes.

_PROPOSAL_LIST_FIELDS = """
    id
    dao {
      id
      subdomain
    }
    creator
    metadata
    yes
    no
    abstain
    supportThreshold
    minVotingPower
    totalVotingPower
    startDate
    endDate
    executed
    executable
"""

_PROPOSAL_DETAIL_FIELDS = """
    createdAt
    creationBlockNumber
    executionDate
    executionBlockNumber
    executionTxHash
    votingMode
    actions {
      to
      value
      data
    }
"""

_TOKEN_FIELDS = """
      token {
        id
        name
        symbol
        __typename
        ... on ERC20Contract {
          decimals
        }
        ... on ERC721Contract {
          baseURI
        }
      }
"""


def _voter_fields(weighted: bool) -> str:
    voting_power = "\n      votingPower" if weighted else ""
    return f"""
    voters {{
      voter {{
        address
      }}
      voteReplaced
      voteOption{voting_power}
    }}
"""


def _plugin_token_fields(weighted: bool) -> str:
    if not weighted:
        return ""
    return f"""
    plugin {{{_TOKEN_FIELDS}    }}
"""


def _capitalized(entity: str) -> str:
    return entity[0].upper() + entity[1:]


def proposal_query(entity: str, weighted: bool = False) -> str:
    fields = _PROPOSAL_LIST_FIELDS + _PROPOSAL_DETAIL_FIELDS + _voter_fields(weighted) + _plugin_token_fields(weighted)
    return f"""
query {_capitalized(entity)}Proposal($proposalId: ID!) {{
  {entity}Proposal(id: $proposalId) {{{fields}  }}
}}
"""


def proposals_query(entity: str, weighted: bool = False) -> str:
    fields = _PROPOSAL_LIST_FIELDS + _voter_fields(weighted) + _plugin_token_fields(weighted)
    name = _capitalized(entity)
    return f"""
query {name}Proposals($where: {name}Proposal_filter!, $limit: Int!, $skip: Int!, $direction: OrderDirection!, $sortBy: {name}Proposal_orderBy!) {{
  {entity}Proposals(where: $where, first: $limit, skip: $skip, orderDirection: $direction, orderBy: $sortBy) {{{fields}  }}
}}
"""


def settings_query(entity: str) -> str:
    return f"""
query {_capitalized(entity)}PluginSettings($address: ID!) {{
  {entity}Plugin(id: $address) {{
    minDuration
    minProposerVotingPower
    minParticipation
    supportThreshold
    votingMode
  }}
}}
"""


def members_query(entity: str) -> str:
    return f"""
query {_capitalized(entity)}Members($address: ID!) {{
  {entity}Plugin(id: $address) {{
    members {{
      address
    }}
  }}
}}
"""


QUERY_TOKEN_VOTING_PLUGIN_TOKEN = f"""
query TokenVotingPluginToken($address: ID!) {{
  tokenVotingPlugin(id: $address) {{{_TOKEN_FIELDS}  }}
}}
"""
