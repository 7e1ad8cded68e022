"""A minimal schema for trying the server out: ``{ hello }`` returns ``"world"``."""

from graphql import GraphQLField, GraphQLObjectType, GraphQLSchema, GraphQLString

schema = GraphQLSchema(
    query=GraphQLObjectType(
        name="RootQueryType",
        fields={
            "hello": GraphQLField(GraphQLString, resolve=lambda _root, _info: "world"),
        },
    ),
)
