from textwrap import dedent

import pytest

from component_usage.usage_graph import UsageGraph


def write(root, rel_path, code):
	p = root / rel_path
	p.parent.mkdir(parents=True, exist_ok=True)
	p.write_text(dedent(code).lstrip("\n"))
	return p


@pytest.fixture
def sample_project(tmp_path):
	write(tmp_path, "src/components/Button.tsx", """
		export function Button({ label }) {
		  return <button>{label}</button>;
		}
		""")
	write(tmp_path, "src/components/Layout.tsx", """
		export const Layout = ({ children }) => <main>{children}</main>;
		""")
	write(tmp_path, "src/forms/LoginForm.tsx", """
		import { Button } from "../components/Button";

		export const LoginForm = () => {
		  return (
		    <form>
		      <Button label="Log in" />
		    </form>
		  );
		};
		""")
	write(tmp_path, "src/pages/LoginPage.jsx", """
		export function LoginPage() {
		  return <Layout><LoginForm /></Layout>;
		}
		""")
	write(tmp_path, "src/pages/SignupPage.tsx", """
		export function SignupPage() {
		  return (
		    <Layout>
		      <Button label="Sign up" />
		      <Button label="Cancel" />
		    </Layout>
		  );
		}
		""")
	# Everything below must be ignored by discovery
	write(tmp_path, "node_modules/ui/Fancy.tsx", """
		export const Fancy = () => <Button label="x" />;
		""")
	write(tmp_path, "dist/Bundle.js", """
		export const Bundle = () => <Button label="x" />;
		""")
	write(tmp_path, "src/components/Button.test.tsx", """
		export const ButtonTest = () => <Button label="x" />;
		""")
	write(tmp_path, "src/components/Button.stories.tsx", """
		export const Primary = () => <Button label="x" />;
		""")
	write(tmp_path, "src/types.d.ts", """
		export declare const Typed: () => void;
		""")
	write(tmp_path, "README.md", "# sample\n")
	return tmp_path


def make_graph(definitions=None, edges=None):
	"""Build a graph from {name: file} and [(used, using, file, line)]."""
	graph = UsageGraph()
	for name, file in (definitions or {}).items():
		graph.record_definition(name, file)
	for used, using, file, line in edges or []:
		graph.record_usage(used, using, file, line)
	return graph
