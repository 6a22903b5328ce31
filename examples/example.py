from lambdadepot import Function1, Function2, SafeGetter, configure_from_file, item

configure_from_file()

parse_port = Function1(int).lift()
address = Function2(lambda host, port: f"{host}:{port}")

settings = {"server": {"host": "localhost", "port": "80a"}}
port = SafeGetter.of(item("server")).then(item("port"))

result = (port.get(settings)
          .to_result()
          .flat_map(parse_port)
          .if_failure_return(8080, when=ValueError)
          .map(address.partial_apply("localhost")))

# Print the resolved address
print(result.get_value())
