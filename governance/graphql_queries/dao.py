_DAO_FIELDS = """
    id
    subdomain
    metadata
    createdAt
    plugins {
      appliedPreparation {
        pluginAddress
      }
      appliedPluginRepo {
        subdomain
      }
      appliedVersion {
        build
        release {
          release
        }
      }
    }
"""

QUERY_DAO = f"""
query Dao($address: ID!) {{
  dao(id: $address) {{{_DAO_FIELDS}  }}
}}
"""

QUERY_DAOS = f"""
query Daos($limit: Int!, $skip: Int!, $direction: OrderDirection!, $sortBy: Dao_orderBy!) {{
  daos(first: $limit, skip: $skip, orderDirection: $direction, orderBy: $sortBy) {{{_DAO_FIELDS}  }}
}}
"""
